# -*- coding: utf-8 -*-
"""
테이블 마크업 재구성 모듈

to_details 결과(RowDetails 목록)로 테이블 요소의 행/셀을 다시 만듭니다.

- HTML: 행마다 tr, 섹션별 thead/tbody/tfoot, rowspan/colspan 속성 (1이면 제거)
- HWPX: 행마다 tr, 셀마다 cellAddr(rowAddr/colAddr)와 cellSpan 갱신,
        tbl의 rowCnt/colCnt 갱신

기존 tr 요소는 같은 위치의 행에 재사용합니다 (속성 유지).
"""

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from ..model.structs import (
    SECTION_BODY,
    SECTION_HEADER,
    SECTIONS,
    Detail,
    RowData,
    RowDetails,
)
from ..model.warehouse import Warehouse
from .parser import HTML_SECTIONS, KIND_HWPX, ParsedTable, local_name


logger = logging.getLogger(__name__)

# 섹션 → HTML 컨테이너 태그
SECTION_TAGS = {section: tag for tag, section in HTML_SECTIONS.items()}


def _set_span(elem: ET.Element, name: str, value: int):
    """span 속성 설정 (1이면 제거)"""
    if value > 1:
        elem.set(name, str(value))
    else:
        elem.attrib.pop(name, None)


def _find_or_create(parent: ET.Element, namespace: str, name: str) -> ET.Element:
    """로컬 이름으로 자식 요소 찾기 (없으면 생성)"""
    for child in parent:
        if local_name(child.tag) == name:
            return child
    return ET.SubElement(parent, f"{namespace}{name}")


class TableWriter:
    """RowDetails → 테이블 마크업"""

    def rebuild(self, table: ParsedTable, row_details: List[RowDetails]) -> ET.Element:
        """
        테이블 요소의 행/셀을 row_details로 교체

        Args:
            table: 파싱된 테이블 (table.rows의 tr 요소를 재사용)
            row_details: to_details 결과

        Returns:
            수정된 테이블 요소
        """
        if table.kind == KIND_HWPX:
            self._rebuild_hwpx(table, row_details)
        else:
            self._rebuild_html(table, row_details)

        logger.debug(f"테이블 재구성: {table.kind}, {len(row_details)}행")
        return table.element

    def _take_row(self, table: ParsedTable, index: int, cell_tags) -> ET.Element:
        """index 위치의 기존 tr 재사용 (셀 제거), 없으면 새 tr"""
        tr: Optional[ET.Element] = None
        if index < len(table.rows):
            tr = table.rows[index].element
        if tr is None:
            return ET.Element(f"{table.namespace}tr")

        for cell in list(tr):
            if local_name(cell.tag) in cell_tags:
                tr.remove(cell)
        return tr

    def _rebuild_html(self, table: ParsedTable, row_details: List[RowDetails]):
        tbl = table.element

        # 기존 행/섹션 컨테이너 분리
        containers: Dict[str, ET.Element] = {}
        for child in list(tbl):
            name = local_name(child.tag)
            if name in HTML_SECTIONS:
                containers.setdefault(HTML_SECTIONS[name], child)
                tbl.remove(child)
            elif name == 'tr':
                tbl.remove(child)

        for container in containers.values():
            for tr in list(container):
                if local_name(tr.tag) == 'tr':
                    container.remove(tr)

        use_containers = bool(containers) or any(rd.section != SECTION_BODY for rd in row_details)

        for i, rd in enumerate(row_details):
            tr = self._take_row(table, i, ('td', 'th'))
            for detail in rd.details:
                _set_span(detail.element, 'rowspan', detail.rowspan)
                _set_span(detail.element, 'colspan', detail.colspan)
                tr.append(detail.element)

            if not use_containers:
                tbl.append(tr)
                continue

            container = containers.get(rd.section)
            if container is None:
                container = ET.Element(f"{table.namespace}{SECTION_TAGS[rd.section]}")
                containers[rd.section] = container
            container.append(tr)

        if use_containers:
            for section in SECTIONS:
                container = containers.get(section)
                if container is not None and any(local_name(tr.tag) == 'tr' for tr in container):
                    tbl.append(container)

    def _rebuild_hwpx(self, table: ParsedTable, row_details: List[RowDetails]):
        tbl = table.element
        ns = table.namespace

        for child in list(tbl):
            if local_name(child.tag) == 'tr':
                tbl.remove(child)

        # 앵커 위치(rowAddr/colAddr)는 출력 행을 다시 배치해서 구함
        placed = Warehouse.generate([
            RowData(
                cells=[Detail(element=d.element, rowspan=d.rowspan, colspan=d.colspan) for d in rd.details],
                section=rd.section,
            )
            for rd in row_details
        ])

        for i, (rd, row) in enumerate(zip(row_details, placed.all)):
            tr = self._take_row(table, i, ('tc',))
            for cell in row.cells:
                tc = cell.element

                addr = _find_or_create(tc, ns, 'cellAddr')
                addr.set('colAddr', str(cell.column))
                addr.set('rowAddr', str(cell.row))

                span = _find_or_create(tc, ns, 'cellSpan')
                span.set('colSpan', str(cell.colspan))
                span.set('rowSpan', str(cell.rowspan))

                if rd.section == SECTION_HEADER:
                    tc.set('header', '1')
                else:
                    tc.attrib.pop('header', None)

                tr.append(tc)
            tbl.append(tr)

        tbl.set('rowCnt', str(placed.grid.rows))
        tbl.set('colCnt', str(placed.grid.columns))

# -*- coding: utf-8 -*-
"""
테이블 마크업 파싱 모듈

XHTML 테이블(table/thead/tbody/tfoot/tr/td/th)과 HWPX 테이블(hp:tbl/hp:tr/hp:tc)을
엔진 입력 행(RowData) 목록으로 변환합니다.

개요:
- TableParser: 테이블 요소 → RowData 목록
- ParsedTable: 테이블 요소 + 파싱된 행
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional

from ..model.structs import (
    SECTION_BODY,
    SECTION_FOOTER,
    SECTION_HEADER,
    Detail,
    RowData,
)


logger = logging.getLogger(__name__)


# XML 네임스페이스
NAMESPACES = {
    'hp': 'http://www.hancom.co.kr/hwpml/2011/paragraph',
    'hs': 'http://www.hancom.co.kr/hwpml/2011/section',
    'hc': 'http://www.hancom.co.kr/hwpml/2011/core',
    'hh': 'http://www.hancom.co.kr/hwpml/2011/head',
}

XHTML_NAMESPACE = 'http://www.w3.org/1999/xhtml'

for prefix, uri in NAMESPACES.items():
    ET.register_namespace(prefix, uri)
ET.register_namespace('', XHTML_NAMESPACE)

KIND_HTML = 'html'
KIND_HWPX = 'hwpx'

# HTML 섹션 컨테이너 → 섹션 태그
HTML_SECTIONS = {
    'thead': SECTION_HEADER,
    'tbody': SECTION_BODY,
    'tfoot': SECTION_FOOTER,
}


def local_name(tag) -> str:
    """네임스페이스를 제외한 태그 이름"""
    if not isinstance(tag, str):
        return ''
    return tag.split('}')[-1]


def namespace_of(tag) -> str:
    """태그의 네임스페이스 접두사 ('{uri}' 또는 '')"""
    if isinstance(tag, str) and tag.startswith('{'):
        return tag.split('}')[0] + '}'
    return ''


def table_kind(tbl_elem) -> Optional[str]:
    """테이블 요소 종류 (html | hwpx | None)"""
    name = local_name(tbl_elem.tag)
    if name == 'table':
        return KIND_HTML
    if name == 'tbl':
        return KIND_HWPX
    return None


@dataclass
class ParsedTable:
    """파싱된 테이블"""
    element: ET.Element
    kind: str = KIND_HTML
    rows: List[RowData] = field(default_factory=list)

    @property
    def namespace(self) -> str:
        return namespace_of(self.element.tag)


class TableParser:
    """테이블 마크업 파싱"""

    def __init__(self, default_section: str = SECTION_BODY):
        """
        Args:
            default_section: 섹션 정보가 없는 행의 섹션
                (HTML은 table 바로 아래 tr, HWPX는 헤더가 아닌 행)
        """
        self._default_section = default_section

    def find_tables(self, root) -> List[ET.Element]:
        """문서 순서대로 모든 테이블 요소 (중첩 테이블 포함)"""
        return [elem for elem in root.iter() if table_kind(elem) is not None]

    def parse_tables(self, root) -> List[ParsedTable]:
        """루트 아래 모든 테이블 파싱"""
        return [self.parse(tbl) for tbl in self.find_tables(root)]

    def parse(self, tbl_elem) -> ParsedTable:
        """테이블 요소 파싱"""
        kind = table_kind(tbl_elem)
        if kind is None:
            raise ValueError(f"테이블 요소가 아닙니다: {tbl_elem.tag}")
        return ParsedTable(element=tbl_elem, kind=kind, rows=self.parse_table(tbl_elem))

    def parse_table(self, tbl_elem) -> List[RowData]:
        """테이블 요소 → RowData 목록"""
        kind = table_kind(tbl_elem)
        if kind == KIND_HWPX:
            rows = self._parse_hwpx_table(tbl_elem)
        elif kind == KIND_HTML:
            rows = self._parse_html_table(tbl_elem)
        else:
            raise ValueError(f"테이블 요소가 아닙니다: {tbl_elem.tag}")

        logger.debug(f"테이블 파싱: {kind}, {len(rows)}행")
        return rows

    def _parse_html_table(self, tbl_elem) -> List[RowData]:
        """XHTML table 파싱 (중첩 테이블의 행은 제외)"""
        rows = []
        for child in tbl_elem:
            name = local_name(child.tag)
            if name == 'tr':
                rows.append(self._parse_html_row(child, self._default_section))
            elif name in HTML_SECTIONS:
                for tr in child:
                    if local_name(tr.tag) == 'tr':
                        rows.append(self._parse_html_row(tr, HTML_SECTIONS[name]))
        return rows

    def _parse_html_row(self, tr_elem, section: str) -> RowData:
        """tr 파싱"""
        cells = []
        for td in tr_elem:
            if local_name(td.tag) not in ('td', 'th'):
                continue
            cells.append(Detail(
                element=td,
                rowspan=td.get('rowspan', 1),
                colspan=td.get('colspan', 1),
            ))
        return RowData(cells=cells, section=section, element=tr_elem)

    def _parse_hwpx_table(self, tbl_elem) -> List[RowData]:
        """HWPX tbl 파싱"""
        rows = []
        for child in tbl_elem:
            if local_name(child.tag) == 'tr':
                rows.append(self._parse_hwpx_row(child))
        return rows

    def _parse_hwpx_row(self, tr_elem) -> RowData:
        """HWPX tr 파싱 (모든 셀이 header="1"이면 헤더 행)"""
        cells = []
        header_flags = []

        for tc in tr_elem:
            if local_name(tc.tag) != 'tc':
                continue

            rowspan, colspan, column = 1, 1, None
            for child in tc:
                tag = local_name(child.tag)
                if tag == 'cellSpan':
                    rowspan = child.get('rowSpan', 1)
                    colspan = child.get('colSpan', 1)
                elif tag == 'cellAddr':
                    column = _parse_int(child.get('colAddr'))

            header_flags.append(tc.get('header', '0') == '1')
            cells.append(Detail(element=tc, rowspan=rowspan, colspan=colspan, column=column))

        section = SECTION_HEADER if header_flags and all(header_flags) else self._default_section
        return RowData(cells=cells, section=section, element=tr_elem)


def _parse_int(value) -> Optional[int]:
    """정수 변환 (실패 시 None)"""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

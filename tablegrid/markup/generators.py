# -*- coding: utf-8 -*-
"""
마크업 gap 셀 생성기

- HTML: 빈 td (또는 th) 요소
- HWPX: 테이블의 기존 셀(템플릿)을 복사하고 텍스트/병합 정보를 초기화한 tc 요소
  (cellSz, cellMargin, borderFillIDRef 등 한글이 요구하는 속성 유지)
  템플릿이 없으면 cellAddr/cellSpan/subList만 가진 최소 tc 요소
  (cellAddr/cellSpan 값은 TableWriter가 채움)
"""

import copy
import xml.etree.ElementTree as ET
from typing import Optional

from ..model.generators import Generators
from ..model.structs import SECTION_BODY
from .parser import KIND_HTML, KIND_HWPX, ParsedTable, local_name


def find_template_cell(table: ParsedTable) -> Optional[ET.Element]:
    """템플릿으로 쓸 셀 찾기 (마지막 본문 셀, 없으면 마지막 셀)"""
    cells = [(row.section, detail.element) for row in table.rows for detail in row.cells]
    for section, element in reversed(cells):
        if section == SECTION_BODY:
            return element
    if cells:
        return cells[-1][1]
    return None


class MarkupGenerators(Generators):
    """테이블 마크업용 gap 셀 생성기"""

    def __init__(
        self,
        kind: str = KIND_HTML,
        namespace: str = "",
        gap_text: str = "",
        gap_tag: str = "td",
        template: Optional[ET.Element] = None,
    ):
        """
        Args:
            kind: 테이블 종류 (html | hwpx)
            namespace: 생성할 요소의 네임스페이스 접두사 ('{uri}' 형식)
            gap_text: gap 셀에 넣을 텍스트
            gap_tag: HTML gap 셀 태그
            template: HWPX gap 셀의 원본이 될 기존 tc 요소
        """
        if kind not in (KIND_HTML, KIND_HWPX):
            raise ValueError(f"지원하지 않는 테이블 종류입니다: {kind!r}")
        self.kind = kind
        self.namespace = namespace
        self.gap_text = gap_text
        self.gap_tag = gap_tag
        self.template = template
        self.created = 0

    @classmethod
    def for_table(cls, table: ParsedTable, gap_text: str = "", gap_tag: str = "td") -> "MarkupGenerators":
        """파싱된 테이블과 같은 종류/네임스페이스의 생성기"""
        template = find_template_cell(table) if table.kind == KIND_HWPX else None
        return cls(
            kind=table.kind,
            namespace=table.namespace,
            gap_text=gap_text,
            gap_tag=gap_tag,
            template=template,
        )

    def gap(self) -> ET.Element:
        self.created += 1
        if self.kind == KIND_HWPX:
            if self.template is not None:
                return self._copy_hwpx_cell()
            return self._create_hwpx_cell()
        return self._create_html_cell()

    def _tag(self, name: str) -> str:
        return f"{self.namespace}{name}"

    def _create_html_cell(self) -> ET.Element:
        td = ET.Element(self._tag(self.gap_tag))
        td.text = self.gap_text or None
        return td

    def _copy_hwpx_cell(self) -> ET.Element:
        """템플릿 셀 복사 후 병합/헤더/텍스트 초기화"""
        tc = copy.deepcopy(self.template)
        tc.attrib.pop('header', None)

        for child in tc:
            tag = local_name(child.tag)

            if tag == 'cellSpan':
                child.set('colSpan', '1')
                child.set('rowSpan', '1')

            elif tag == 'subList':
                # 첫 번째 t에만 gap 텍스트, 나머지 텍스트는 비움
                first = True
                for t in child.iter():
                    if local_name(t.tag) != 't':
                        continue
                    for sub in list(t):
                        t.remove(sub)
                    t.text = (self.gap_text or None) if first else None
                    first = False

        return tc

    def _create_hwpx_cell(self) -> ET.Element:
        """tc > cellAddr, cellSpan, subList > p > run > t"""
        tc = ET.Element(self._tag('tc'))

        addr = ET.SubElement(tc, self._tag('cellAddr'))
        addr.set('colAddr', '0')
        addr.set('rowAddr', '0')

        span = ET.SubElement(tc, self._tag('cellSpan'))
        span.set('colSpan', '1')
        span.set('rowSpan', '1')

        sublist = ET.SubElement(tc, self._tag('subList'))
        p = ET.SubElement(sublist, self._tag('p'))
        run = ET.SubElement(p, self._tag('run'))
        t = ET.SubElement(run, self._tag('t'))
        t.text = self.gap_text or None

        return tc

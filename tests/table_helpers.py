# -*- coding: utf-8 -*-
"""
테스트용 테이블 생성 헬퍼
"""

import xml.etree.ElementTree as ET
import zipfile
from typing import List, Optional

from tablegrid.model import Detail, ElementNew, RowCells, RowData


NS_SECTION = "http://www.hancom.co.kr/hwpml/2011/section"
NS_PARA = "http://www.hancom.co.kr/hwpml/2011/paragraph"


class Marker:
    """셀 요소 대용 객체 (이름으로 구분)"""

    def __init__(self, name: str):
        self.name = name

    def __repr__(self):
        return f"Marker({self.name!r})"


def make_cell(name: str, rowspan: int = 1, colspan: int = 1, **kwargs) -> Detail:
    return Detail(element=Marker(name), rowspan=rowspan, colspan=colspan, **kwargs)


def make_row(*cells: Detail, section: str = 'body') -> RowData:
    return RowData(cells=list(cells), section=section)


def names(elements) -> List[str]:
    return [e.name for e in elements]


def dense(*rows: List[Marker], section: str = 'body') -> List[RowCells]:
    """Marker 2차원 목록 → dense grid"""
    return [RowCells(cells=[ElementNew(element=m) for m in row], section=section) for row in rows]


def nested_rowspan_rows() -> List[RowData]:
    """
    중첩 rowspan 테이블

    Row 0: Head1(4x1), Head2(2x1), Col1, Col2
    Row 1: ↓,          ↓,          A,    B
    Row 2: ↓,          Head3(2x1), C,    D
    Row 3: ↓,          ↓,          E,    F
    """
    return [
        make_row(make_cell('Head1', rowspan=4), make_cell('Head2', rowspan=2),
                 make_cell('Col1'), make_cell('Col2'), section='header'),
        make_row(make_cell('A'), make_cell('B')),
        make_row(make_cell('Head3', rowspan=2), make_cell('C'), make_cell('D')),
        make_row(make_cell('E'), make_cell('F')),
    ]


def mixed_span_rows() -> List[RowData]:
    """
    rowspan/colspan 혼합 테이블

    Row 0: T(1x3)
    Row 1: L(2x1), M(1x2)
    Row 2: ↓,      N,     O
    Row 3: P(1x2),        Q
    """
    return [
        make_row(make_cell('T', colspan=3)),
        make_row(make_cell('L', rowspan=2), make_cell('M', colspan=2)),
        make_row(make_cell('N'), make_cell('O')),
        make_row(make_cell('P', colspan=2), make_cell('Q'), section='footer'),
    ]


def overlapping_span_rows() -> List[RowData]:
    """
    colspan이 위 행의 rowspan 셀과 겹치는 테이블

    Row 0: X, A(3x1), Y
    Row 1: W(1x3)          (A와 겹침 → 1x1, 오른쪽 끝은 gap)
    Row 2: P, ↓,      Q
    """
    return [
        make_row(make_cell('X'), make_cell('A', rowspan=3), make_cell('Y')),
        make_row(make_cell('W', colspan=3)),
        make_row(make_cell('P'), make_cell('Q')),
    ]


# ============================================================
# HWPX
# ============================================================

def make_tag(ns: str, name: str) -> str:
    return f"{{{ns}}}{name}"


def create_hwpx_cell(row: int, col: int, text: str, rowspan: int = 1, colspan: int = 1,
                     header: Optional[bool] = None) -> ET.Element:
    """HWPX tc 요소 생성"""
    tc = ET.Element(make_tag(NS_PARA, 'tc'))
    if header is not None:
        tc.set('header', '1' if header else '0')

    addr = ET.SubElement(tc, make_tag(NS_PARA, 'cellAddr'))
    addr.set('colAddr', str(col))
    addr.set('rowAddr', str(row))

    span = ET.SubElement(tc, make_tag(NS_PARA, 'cellSpan'))
    span.set('colSpan', str(colspan))
    span.set('rowSpan', str(rowspan))

    sublist = ET.SubElement(tc, make_tag(NS_PARA, 'subList'))
    p = ET.SubElement(sublist, make_tag(NS_PARA, 'p'))
    run = ET.SubElement(p, make_tag(NS_PARA, 'run'))
    t = ET.SubElement(run, make_tag(NS_PARA, 't'))
    t.text = text

    # 한글이 요구하는 셀 크기/여백 (gap 셀 템플릿 확인용)
    tc.set('borderFillIDRef', '3')
    size = ET.SubElement(tc, make_tag(NS_PARA, 'cellSz'))
    size.set('width', str(7000 * colspan))
    size.set('height', str(1500 * rowspan))
    margin = ET.SubElement(tc, make_tag(NS_PARA, 'cellMargin'))
    for side in ('left', 'right', 'top', 'bottom'):
        margin.set(side, '141')

    return tc


def create_hwpx_section_with_gap() -> ET.Element:
    """
    셀 하나가 빠진 중첩 rowspan 테이블 (section 루트)

    Row 0: Head1(3x1), Col1, Col2   (header)
    Row 1: ↓,          A,    B
    Row 2: ↓,          C,    (없음)
    """
    section = ET.Element(make_tag(NS_SECTION, 'sec'))
    tbl = ET.SubElement(section, make_tag(NS_PARA, 'tbl'))
    tbl.set('id', 'test_gap')
    tbl.set('rowCnt', '3')
    tbl.set('colCnt', '3')

    tr0 = ET.SubElement(tbl, make_tag(NS_PARA, 'tr'))
    tr0.append(create_hwpx_cell(0, 0, 'Head1', rowspan=3, header=True))
    tr0.append(create_hwpx_cell(0, 1, 'Col1', header=True))
    tr0.append(create_hwpx_cell(0, 2, 'Col2', header=True))

    tr1 = ET.SubElement(tbl, make_tag(NS_PARA, 'tr'))
    tr1.append(create_hwpx_cell(1, 1, 'A'))
    tr1.append(create_hwpx_cell(1, 2, 'B'))

    tr2 = ET.SubElement(tbl, make_tag(NS_PARA, 'tr'))
    tr2.append(create_hwpx_cell(2, 1, 'C'))

    return section


def write_hwpx(output_path, section: ET.Element):
    """section 하나짜리 HWPX 파일 생성"""
    section_xml = ET.tostring(section, encoding='UTF-8', xml_declaration=True)
    with zipfile.ZipFile(output_path, 'w', zipfile.ZIP_DEFLATED) as zf:
        zf.writestr('mimetype', 'application/hwp+zip', compress_type=zipfile.ZIP_STORED)
        zf.writestr('Contents/section0.xml', section_xml)
        zf.writestr('Contents/content.hpf', '<?xml version="1.0"?><content/>')
    return output_path

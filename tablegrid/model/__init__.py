# -*- coding: utf-8 -*-
"""
테이블 그리드 모델

- structs: 셀/행 데이터 모델
- warehouse: 입력 행 → 셀 배치 인덱스
- table_grid: 병합 영역(subgrid) 계산
- transitions: dense grid 생성 및 출력 행 변환
- generators: gap 셀 생성기
"""

from .structs import (
    SECTION_HEADER,
    SECTION_BODY,
    SECTION_FOOTER,
    SECTIONS,
    Detail,
    RowData,
    Extended,
    GridSize,
    ElementNew,
    RowCells,
    DetailNew,
    RowDetails,
    SubgridSpan,
)
from .warehouse import Warehouse
from .table_grid import default_comparator, get_row, get_column, subgrid
from .generators import Generators, CallbackGenerators
from .transitions import to_grid, to_details, normalize_rows

__all__ = [
    'SECTION_HEADER',
    'SECTION_BODY',
    'SECTION_FOOTER',
    'SECTIONS',
    'Detail',
    'RowData',
    'Extended',
    'GridSize',
    'ElementNew',
    'RowCells',
    'DetailNew',
    'RowDetails',
    'SubgridSpan',
    'Warehouse',
    'default_comparator',
    'get_row',
    'get_column',
    'subgrid',
    'Generators',
    'CallbackGenerators',
    'to_grid',
    'to_details',
    'normalize_rows',
]

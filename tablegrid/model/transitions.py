# -*- coding: utf-8 -*-
"""
Warehouse ↔ dense grid ↔ 출력 행 변환

주요 기능:
- to_grid: Warehouse를 빈틈 없는 dense grid로 변환 (빈 위치는 gap 셀로 채움)
- to_details: dense grid에서 병합 영역을 앵커 셀 하나로 합침
- normalize_rows: 입력 행 → 출력 행 (위 두 단계를 연결)

사용 예:
    warehouse = Warehouse.generate(rows)
    grid = to_grid(warehouse, generators, is_new=False)
    # ... 행/열 추가·삭제 등 grid 편집 ...
    row_details = to_details(grid, default_comparator)
"""

import logging
from typing import List, Optional

from .generators import Generators
from .structs import DetailNew, ElementNew, RowCells, RowData, RowDetails
from .table_grid import Comparator, default_comparator, subgrid
from .warehouse import Warehouse


logger = logging.getLogger(__name__)


def to_grid(warehouse: Warehouse, generators: Generators, is_new: bool) -> List[RowCells]:
    """
    Warehouse를 dense grid로 변환

    Args:
        warehouse: 셀 배치 인덱스
        generators: 빈 위치에 넣을 gap 셀 생성기
        is_new: 기존 셀에 지정할 신규 여부 (gap 셀은 항상 True)

    Returns:
        행 목록 (각 행은 열 수만큼의 ElementNew)
    """
    grid = []
    gaps = 0

    for i in range(warehouse.grid.rows):
        row_cells = []
        for j in range(warehouse.grid.columns):
            item = warehouse.access(i, j)
            if item is not None:
                row_cells.append(ElementNew(element=item.element, is_new=is_new))
            else:
                row_cells.append(ElementNew(element=generators.gap(), is_new=True))
                gaps += 1
        grid.append(RowCells(cells=row_cells, section=warehouse.all[i].section))

    if gaps:
        logger.debug(f"gap 셀 {gaps}개 생성 ({warehouse.grid.rows}행 x {warehouse.grid.columns}열)")

    return grid


def to_details(grid: List[RowCells], comparator: Comparator = default_comparator) -> List[RowDetails]:
    """
    dense grid를 출력 행 목록으로 변환

    행 우선(왼쪽→오른쪽) 순회이므로 병합 영역은 항상 왼쪽 위 앵커에서
    처음 만나게 됩니다. 이미 처리한 영역(seen)에 속한 칸은 건너뜁니다.

    Args:
        grid: dense grid
        comparator: 두 셀 요소가 같은 셀인지 판단하는 함수

    Returns:
        입력 행마다 하나의 RowDetails (앵커 셀만 포함, 비어 있을 수 있음)
    """
    seen = [[False] * len(row.cells) for row in grid]

    def update_seen(ri: int, ci: int, rowspan: int, colspan: int):
        for r in range(ri, ri + rowspan):
            for c in range(ci, ci + colspan):
                seen[r][c] = True

    result = []
    for ri, row in enumerate(grid):
        details = []
        for ci, cell in enumerate(row.cells):
            # 이미 다른 앵커의 영역이면 건너뜀
            if seen[ri][ci]:
                continue
            span = subgrid(grid, ri, ci, comparator)
            update_seen(ri, ci, span.rowspan, span.colspan)
            details.append(DetailNew(
                element=cell.element,
                rowspan=span.rowspan,
                colspan=span.colspan,
                is_new=cell.is_new,
            ))
        result.append(RowDetails(details=details, section=row.section))

    return result


def normalize_rows(
    rows: List[RowData],
    generators: Generators,
    comparator: Optional[Comparator] = None,
    is_new: bool = False,
) -> List[RowDetails]:
    """입력 행을 빈틈을 채우고 span을 다시 계산한 출력 행으로 변환"""
    warehouse = Warehouse.generate(rows)
    grid = to_grid(warehouse, generators, is_new)
    return to_details(grid, comparator or default_comparator)

# -*- coding: utf-8 -*-
"""
dense grid 병합 영역(subgrid) 계산

앵커 위치에서 시작해 같은 셀이 이어지는 만큼 colspan/rowspan을 구합니다.
- colspan: 앵커 행에서 오른쪽으로 같은 셀이 이어지는 칸 수
- rowspan: 앵커 열에서 아래쪽으로 같은 셀이 이어지는 칸 수
"""

from typing import Any, Callable, List

from .structs import ElementNew, RowCells, SubgridSpan


Comparator = Callable[[Any, Any], bool]


def default_comparator(a: Any, b: Any) -> bool:
    """기본 비교: 같은 객체인지 확인"""
    return a is b


def get_row(grid: List[RowCells], index: int) -> RowCells:
    return grid[index]


def get_column(grid: List[RowCells], index: int) -> List[ElementNew]:
    return [row.cells[index] for row in grid]


def _find_diff(xs: List[ElementNew], comparator: Comparator) -> int:
    """첫 칸과 다른 셀이 처음 나오는 위치 (첫 칸은 항상 포함)"""
    first = xs[0]
    for index in range(1, len(xs)):
        if not comparator(first.element, xs[index].element):
            return index
    return len(xs)


def subgrid(
    grid: List[RowCells],
    row: int,
    column: int,
    comparator: Comparator = default_comparator,
) -> SubgridSpan:
    """
    앵커 (row, column)에서 시작하는 병합 영역 크기 계산

    Args:
        grid: dense grid (모든 행의 칸 수가 같아야 함)
        row: 앵커 행
        column: 앵커 열
        comparator: 두 셀 요소가 같은 셀인지 판단하는 함수

    Returns:
        SubgridSpan (rowspan >= 1, colspan >= 1)
    """
    assert 0 <= row < len(grid), f"행 범위 밖: {row} (총 {len(grid)}행)"
    assert 0 <= column < len(grid[row].cells), f"열 범위 밖: {column} (총 {len(grid[row].cells)}열)"
    assert all(len(r.cells) > column for r in grid), f"열 {column}이 없는 행이 있음 (dense grid 아님)"

    rest_of_row = get_row(grid, row).cells[column:]
    colspan = _find_diff(rest_of_row, comparator)

    rest_of_column = get_column(grid, column)[row:]
    rowspan = _find_diff(rest_of_column, comparator)

    return SubgridSpan(rowspan=rowspan, colspan=colspan)

# -*- coding: utf-8 -*-
"""
테이블 Warehouse (셀 배치 인덱스)

입력 행/셀 목록을 (row, column) → 셀 조회 구조로 변환합니다.

배치 규칙:
- 행은 위에서 아래로, 셀은 왼쪽에서 오른쪽으로 순회
- 각 셀은 명목 열(없으면 0)부터 현재 행에서 비어 있는 첫 열에 배치
  (이전 행의 rowspan 셀이 차지한 열은 건너뜀)
- 셀이 차지하는 [row, row+rowspan) x [col, col+colspan) 영역을 모두 기록
- 열 수 = 셀이 도달한 가장 오른쪽 끝, 행 수 = 입력 행 수

잘못된 입력은 실패시키지 않고 보정합니다 (adjustments에 기록):
- 명목 열이 이미 차지된 경우 → 다음 빈 열로 이동
- rowspan이 마지막 행을 넘는 경우 → 남은 행 수로 잘라냄
- span이 먼저 배치된 셀과 겹치는 경우 → colspan, rowspan 순으로 잘라 직사각형 유지
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from .structs import Extended, GridSize, RowData


logger = logging.getLogger(__name__)


class Warehouse:
    """테이블 셀 배치 인덱스 (읽기 전용)"""

    def __init__(
        self,
        grid: GridSize,
        access: List[Optional[Extended]],
        rows: List[RowData],
        adjustments: Optional[List[str]] = None,
    ):
        """
        Args:
            grid: 테이블 크기
            access: rows*columns 크기의 평면 목록 (row*columns+col 인덱스)
            rows: 배치된 셀(Extended)로 구성된 행 목록
            adjustments: 배치 중 적용된 보정 기록
        """
        self.grid = grid
        self._access = access
        self._rows = rows
        self.adjustments = adjustments if adjustments is not None else []

    @classmethod
    def generate(cls, rows: List[RowData]) -> "Warehouse":
        """입력 행 목록으로 Warehouse 생성"""
        occupied: Dict[Tuple[int, int], Extended] = {}
        placed_rows: List[RowData] = []
        adjustments: List[str] = []

        max_rows = len(rows)
        max_columns = 0

        for r, row in enumerate(rows):
            current_row = []

            for detail in row.cells:
                nominal = detail.column if detail.column is not None and detail.column > 0 else 0
                start = nominal
                while (r, start) in occupied:
                    start += 1

                if detail.column is not None and start != nominal:
                    adjustments.append(f"relocated:r{r}c{nominal}->c{start}")
                    logger.debug(f"명목 열이 이미 차지됨: ({r}, {nominal}) → ({r}, {start})")

                rowspan = min(detail.rowspan, max_rows - r)
                if rowspan != detail.rowspan:
                    adjustments.append(f"clipped_rowspan:r{r}c{start}:{detail.rowspan}->{rowspan}")
                    logger.debug(f"rowspan 잘라냄: ({r}, {start}) {detail.rowspan} → {rowspan}")

                # 먼저 배치된 셀과 겹치지 않는 직사각형으로 축소
                colspan = 1
                while colspan < detail.colspan and (r, start + colspan) not in occupied:
                    colspan += 1
                if colspan != detail.colspan:
                    adjustments.append(f"clipped_colspan:r{r}c{start}:{detail.colspan}->{colspan}")
                    logger.debug(f"colspan 잘라냄: ({r}, {start}) {detail.colspan} → {colspan}")

                height = 1
                while height < rowspan and not any(
                    (r + height, cc) in occupied for cc in range(start, start + colspan)
                ):
                    height += 1
                if height != rowspan:
                    adjustments.append(f"clipped_rowspan:r{r}c{start}:{rowspan}->{height}")
                    logger.debug(f"rowspan 잘라냄: ({r}, {start}) {rowspan} → {height}")
                    rowspan = height

                current = Extended(
                    element=detail.element,
                    rowspan=rowspan,
                    colspan=colspan,
                    row=r,
                    column=start,
                    is_new=detail.is_new,
                )

                for cr in range(r, r + rowspan):
                    for cc in range(start, start + colspan):
                        occupied[(cr, cc)] = current

                max_columns = max(max_columns, start + colspan)
                current_row.append(current)

            placed_rows.append(RowData(cells=current_row, section=row.section, element=row.element))

        access: List[Optional[Extended]] = [None] * (max_rows * max_columns)
        for (r, c), cell in occupied.items():
            access[r * max_columns + c] = cell

        grid = GridSize(rows=max_rows, columns=max_columns)
        logger.debug(f"Warehouse 생성: {grid.rows}행 x {grid.columns}열, 보정 {len(adjustments)}건")

        return cls(grid, access, placed_rows, adjustments)

    @property
    def all(self) -> List[RowData]:
        """배치된 셀로 구성된 행 목록 (섹션 조회용)"""
        return self._rows

    def access(self, row: int, column: int) -> Optional[Extended]:
        """(row, column) 위치를 커버하는 셀 반환 (없거나 범위 밖이면 None)"""
        if not (0 <= row < self.grid.rows and 0 <= column < self.grid.columns):
            return None
        return self._access[row * self.grid.columns + column]

    def just_cells(self) -> List[Extended]:
        """모든 셀 (행 순서, 행 내 왼쪽→오른쪽)"""
        return [cell for row in self._rows for cell in row.cells]

    def filter_items(self, predicate: Callable[[Extended], bool]) -> List[Extended]:
        """조건에 맞는 셀 목록"""
        return [cell for cell in self.just_cells() if predicate(cell)]

    def find_item(
        self,
        element: Any,
        comparator: Callable[[Any, Any], bool],
    ) -> Optional[Extended]:
        """element와 같은 셀 찾기 (comparator 기준, 첫 번째 셀)"""
        for cell in self.just_cells():
            if comparator(element, cell.element):
                return cell
        return None

    def gap_count(self) -> int:
        """셀이 없는 위치 수"""
        return sum(1 for cell in self._access if cell is None)

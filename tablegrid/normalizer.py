# -*- coding: utf-8 -*-
"""
테이블 정규화 모듈

마크업 테이블의 빈 위치를 gap 셀로 채우고 rowspan/colspan을 다시 계산해
테이블 요소에 반영합니다.

처리 순서:
1. TableParser로 테이블 요소 → RowData 목록
2. Warehouse.generate → to_grid (gap 셀 생성) → to_details
3. TableWriter로 테이블 요소 재구성

사용 예:
    doc = TableDocument.load("input.hwpx")
    normalizer = TableNormalizer()
    for table in doc.tables:
        normalizer.normalize(table)
    doc.save("output.hwpx")
"""

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .config import EngineConfig
from .markup.generators import MarkupGenerators
from .markup.parser import ParsedTable
from .markup.writer import TableWriter
from .model.structs import GridSize, RowDetails
from .model.table_grid import Comparator, default_comparator
from .model.transitions import to_details, to_grid
from .model.warehouse import Warehouse


logger = logging.getLogger(__name__)


@dataclass
class NormalizeResult:
    """테이블 정규화 결과"""
    grid: GridSize
    row_details: List[RowDetails] = field(default_factory=list)
    gaps_filled: int = 0
    adjustments: List[str] = field(default_factory=list)

    @property
    def cell_count(self) -> int:
        return sum(len(rd.details) for rd in self.row_details)


class TableNormalizer:
    """마크업 테이블 정규화"""

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        comparator: Comparator = default_comparator,
        writer: Optional[TableWriter] = None,
    ):
        """
        Args:
            config: 엔진 설정 (None이면 기본값)
            comparator: 셀 동일성 비교 함수
            writer: 마크업 재구성기
        """
        self.config = config or EngineConfig()
        self.comparator = comparator
        self.writer = writer or TableWriter()

    def normalize(self, table: ParsedTable, write: bool = True) -> NormalizeResult:
        """
        테이블 정규화

        Args:
            table: 파싱된 테이블
            write: True면 결과를 테이블 요소에 반영

        Returns:
            NormalizeResult
        """
        generators = MarkupGenerators.for_table(
            table,
            gap_text=self.config.markup.gap_text,
            gap_tag=self.config.markup.gap_tag,
        )

        warehouse = Warehouse.generate(table.rows)
        grid = to_grid(warehouse, generators, self.config.grid.mark_cells_as_new)
        row_details = to_details(grid, self.comparator)

        if write:
            self.writer.rebuild(table, row_details)

        result = NormalizeResult(
            grid=warehouse.grid,
            row_details=row_details,
            gaps_filled=generators.created,
            adjustments=list(warehouse.adjustments),
        )
        logger.info(
            f"테이블 정규화: {result.grid.rows}행 x {result.grid.columns}열, "
            f"셀 {result.cell_count}개, gap {result.gaps_filled}개, 보정 {len(result.adjustments)}건"
        )
        return result


def cell_text(element: Any) -> str:
    """셀 요소의 텍스트 (하위 요소 포함)"""
    if element is None or not hasattr(element, 'itertext'):
        return ""
    return ''.join(element.itertext()).strip()


def print_table_structure(result: NormalizeResult, max_rows: int = 20):
    """정규화된 테이블 구조 출력"""
    print(f"크기: {result.grid.rows}행 x {result.grid.columns}열")
    print(f"셀: {result.cell_count}개, gap: {result.gaps_filled}개")
    for note in result.adjustments:
        print(f"  보정: {note}")
    print()

    for row, rd in enumerate(result.row_details[:max_rows]):
        row_str = f"Row {row:2d} [{rd.section}]:"
        if not rd.details:
            row_str += " (병합 영역)"
        for detail in rd.details:
            text = cell_text(detail.element)
            text = text[:10] + "..." if len(text) > 10 else text
            span = f"({detail.rowspan}x{detail.colspan})" if detail.rowspan > 1 or detail.colspan > 1 else ""
            new = "*" if detail.is_new else ""
            row_str += f" | {text or '(empty)'}{span}{new}"
        print(row_str)

    if len(result.row_details) > max_rows:
        print(f"... ({len(result.row_details) - max_rows}행 더 있음)")

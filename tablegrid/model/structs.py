# -*- coding: utf-8 -*-
"""
테이블 그리드 데이터 모델

개요:
- Detail: 입력 셀 (element + rowspan/colspan)
- RowData: 입력 행 (셀 목록 + 섹션)
- Extended: Warehouse에 배치된 셀 (앵커 위치 포함)
- GridSize: 테이블 크기 (행 x 열)
- ElementNew / RowCells: 빈틈 없는 dense grid의 셀/행
- DetailNew / RowDetails: 병합 영역을 하나로 합친 출력 셀/행
- SubgridSpan: subgrid 계산 결과
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional


SECTION_HEADER = 'header'
SECTION_BODY = 'body'
SECTION_FOOTER = 'footer'

SECTIONS = (SECTION_HEADER, SECTION_BODY, SECTION_FOOTER)


def _clamp_span(value) -> int:
    """span 값 보정 (None, 0, 음수, 잘못된 값 → 1)"""
    try:
        value = int(value)
    except (TypeError, ValueError):
        return 1
    return max(1, value)


@dataclass
class Detail:
    """입력 셀 정보"""
    # 셀 요소 참조 (외부 소유, 엔진은 수정하지 않음)
    element: Any = None
    rowspan: int = 1
    colspan: int = 1

    # 호출자가 지정하는 신규 셀 여부
    is_new: bool = False

    # 명목 열 위치 (HWPX cellAddr 등). None이면 다음 빈 열
    column: Optional[int] = None

    def __post_init__(self):
        self.rowspan = _clamp_span(self.rowspan)
        self.colspan = _clamp_span(self.colspan)


@dataclass
class RowData:
    """입력 행 정보"""
    cells: List[Any] = field(default_factory=list)
    section: str = SECTION_BODY

    # tr 요소 참조
    element: Any = None

    def __post_init__(self):
        if self.section not in SECTIONS:
            raise ValueError(f"알 수 없는 섹션입니다: {self.section!r} (허용: {', '.join(SECTIONS)})")


@dataclass
class Extended:
    """Warehouse에 배치된 셀 (앵커 좌표 포함)"""
    element: Any = None
    rowspan: int = 1
    colspan: int = 1
    row: int = 0
    column: int = 0
    is_new: bool = False

    @property
    def end_row(self) -> int:
        return self.row + self.rowspan - 1

    @property
    def end_column(self) -> int:
        return self.column + self.colspan - 1

    def covers(self, row: int, column: int) -> bool:
        """특정 (row, column) 위치를 이 셀이 커버하는지 확인"""
        return (self.row <= row <= self.end_row and
                self.column <= column <= self.end_column)


@dataclass(frozen=True)
class GridSize:
    """테이블 크기"""
    rows: int = 0
    columns: int = 0


@dataclass
class ElementNew:
    """dense grid의 한 칸"""
    element: Any = None
    is_new: bool = False


@dataclass
class RowCells:
    """dense grid의 한 행"""
    cells: List[ElementNew] = field(default_factory=list)
    section: str = SECTION_BODY


@dataclass
class DetailNew:
    """병합 영역을 하나로 합친 출력 셀 (앵커 위치에만 존재)"""
    element: Any = None
    rowspan: int = 1
    colspan: int = 1
    is_new: bool = False


@dataclass
class RowDetails:
    """출력 행 (앵커 셀만 포함)"""
    details: List[DetailNew] = field(default_factory=list)
    section: str = SECTION_BODY


@dataclass(frozen=True)
class SubgridSpan:
    """subgrid 계산 결과"""
    rowspan: int = 1
    colspan: int = 1

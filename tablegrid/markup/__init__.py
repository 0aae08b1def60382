# -*- coding: utf-8 -*-
"""
테이블 마크업 입출력

- parser: XHTML/HWPX 테이블 → 엔진 입력 행
- generators: gap 셀 요소 생성
- writer: 출력 행 → 테이블 마크업
- document: HWPX/XHTML 파일 로드·저장
"""

from .parser import TableParser, ParsedTable, NAMESPACES, KIND_HTML, KIND_HWPX
from .generators import MarkupGenerators
from .writer import TableWriter
from .document import TableDocument

__all__ = [
    'TableParser',
    'ParsedTable',
    'NAMESPACES',
    'KIND_HTML',
    'KIND_HWPX',
    'MarkupGenerators',
    'TableWriter',
    'TableDocument',
]

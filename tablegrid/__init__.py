# -*- coding: utf-8 -*-
"""
tablegrid 패키지

rowspan/colspan이 있는 테이블을 빈틈 없는 그리드로 변환하고,
편집된 그리드에서 다시 병합 셀 정보를 계산하는 도구

모듈:
- model: Warehouse, subgrid, dense grid 변환 (핵심 엔진)
- markup: XHTML/HWPX 테이블 입출력
- normalizer: 마크업 테이블 정규화
- config: YAML 설정 및 로깅
"""

from .config import (
    PACKAGE_ROOT,
    DEFAULT_CONFIG_PATH,
    EngineConfig,
    load_config,
    setup_logging,
)
from .model import (
    Detail,
    RowData,
    Warehouse,
    default_comparator,
    subgrid,
    Generators,
    CallbackGenerators,
    to_grid,
    to_details,
    normalize_rows,
)

__version__ = '0.1.0'

__all__ = [
    'PACKAGE_ROOT',
    'DEFAULT_CONFIG_PATH',
    'EngineConfig',
    'load_config',
    'setup_logging',
    'Detail',
    'RowData',
    'Warehouse',
    'default_comparator',
    'subgrid',
    'Generators',
    'CallbackGenerators',
    'to_grid',
    'to_details',
    'normalize_rows',
]

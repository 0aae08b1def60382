# -*- coding: utf-8 -*-
"""
프로젝트 설정 및 로깅 관리

YAML 설정 파일(tablegrid_config.yaml) 또는 기본값으로 엔진 옵션을 설정합니다.
설정 파일 경로는 환경변수 TABLEGRID_CONFIG로 바꿀 수 있습니다.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .model.structs import SECTION_BODY, SECTIONS


# ============================================================
# 기본 경로 설정
# ============================================================

PACKAGE_ROOT = Path(__file__).parent.resolve()

DEFAULT_CONFIG_PATH = PACKAGE_ROOT / 'tablegrid_config.yaml'


def get_config_path() -> Path:
    """설정 파일 경로 (환경변수 우선)"""
    return Path(os.environ.get('TABLEGRID_CONFIG', str(DEFAULT_CONFIG_PATH)))


# ============================================================
# 설정 모델
# ============================================================

@dataclass
class GridConfig:
    """그리드 변환 설정"""
    # to_grid에서 기존 셀에 지정할 신규 여부
    mark_cells_as_new: bool = False

    # 섹션 정보가 없는 행의 기본 섹션
    default_section: str = SECTION_BODY


@dataclass
class MarkupConfig:
    """마크업 입출력 설정"""
    # gap 셀에 넣을 텍스트
    gap_text: str = ""

    # HTML gap 셀 태그 (td | th)
    gap_tag: str = "td"


@dataclass
class EngineConfig:
    """엔진 통합 설정"""
    log_level: str = "INFO"
    grid: GridConfig = field(default_factory=GridConfig)
    markup: MarkupConfig = field(default_factory=MarkupConfig)


class ConfigLoader:
    """YAML 설정 로더"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else get_config_path()
        self._config: Optional[EngineConfig] = None

    def load(self, config_path: Optional[Union[str, Path]] = None) -> EngineConfig:
        """YAML 설정 파일 로드 (파일이 없으면 기본값)"""
        path = Path(config_path) if config_path else self.config_path

        if path and path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            self._config = self._parse_config(data)
        else:
            self._config = EngineConfig()

        return self._config

    def _parse_config(self, data: Dict[str, Any]) -> EngineConfig:
        """설정 데이터 파싱"""
        config = EngineConfig()

        logging_data = data.get('logging') or {}
        config.log_level = str(logging_data.get('level', config.log_level)).upper()

        grid_data = data.get('grid') or {}
        config.grid.mark_cells_as_new = bool(grid_data.get('mark_cells_as_new', False))
        section = grid_data.get('default_section', SECTION_BODY)
        if section not in SECTIONS:
            raise ValueError(f"알 수 없는 기본 섹션입니다: {section!r}")
        config.grid.default_section = section

        markup_data = data.get('markup') or {}
        config.markup.gap_text = str(markup_data.get('gap_text') or '')
        gap_tag = str(markup_data.get('gap_tag', 'td')).lower()
        if gap_tag not in ('td', 'th'):
            raise ValueError(f"gap_tag는 td 또는 th여야 합니다: {gap_tag!r}")
        config.markup.gap_tag = gap_tag

        return config

    @property
    def config(self) -> EngineConfig:
        """현재 로드된 설정"""
        if self._config is None:
            self.load()
        return self._config


# 편의 함수
def load_config(config_path: Optional[Union[str, Path]] = None) -> EngineConfig:
    """엔진 설정 로드"""
    return ConfigLoader(config_path).load()


# ============================================================
# 로깅 설정
# ============================================================

def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """로깅 설정"""
    logger = logging.getLogger('tablegrid')

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger.setLevel(level)
    return logger

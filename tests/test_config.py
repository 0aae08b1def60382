# -*- coding: utf-8 -*-
"""
설정 로더 / 로깅 설정 테스트
"""

import logging

import pytest

from tablegrid.config import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    EngineConfig,
    load_config,
    setup_logging,
)


def test_packaged_config_matches_defaults():
    assert DEFAULT_CONFIG_PATH.exists()
    assert load_config(DEFAULT_CONFIG_PATH) == EngineConfig()


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / 'missing.yaml')

    assert config.log_level == 'INFO'
    assert config.grid.mark_cells_as_new is False
    assert config.grid.default_section == 'body'
    assert config.markup.gap_tag == 'td'


def test_yaml_values_are_loaded(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text(
        "logging:\n"
        "  level: debug\n"
        "grid:\n"
        "  mark_cells_as_new: true\n"
        "  default_section: header\n"
        "markup:\n"
        "  gap_text: '-'\n"
        "  gap_tag: TH\n"
        "unknown: 1\n",
        encoding='utf-8',
    )

    config = load_config(path)

    assert config.log_level == 'DEBUG'
    assert config.grid.mark_cells_as_new is True
    assert config.grid.default_section == 'header'
    assert config.markup.gap_text == '-'
    assert config.markup.gap_tag == 'th'


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / 'empty.yaml'
    path.write_text("", encoding='utf-8')

    assert load_config(path) == EngineConfig()


@pytest.mark.parametrize('content', [
    "grid:\n  default_section: sidebar\n",
    "markup:\n  gap_tag: div\n",
])
def test_invalid_values_are_rejected(tmp_path, content):
    path = tmp_path / 'bad.yaml'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(ValueError):
        load_config(path)


def test_environment_variable_overrides_path(tmp_path, monkeypatch):
    path = tmp_path / 'env.yaml'
    path.write_text("grid:\n  mark_cells_as_new: true\n", encoding='utf-8')
    monkeypatch.setenv('TABLEGRID_CONFIG', str(path))

    loader = ConfigLoader()

    assert loader.config_path == path
    assert loader.config.grid.mark_cells_as_new is True


def test_setup_logging_is_idempotent():
    logger = setup_logging('DEBUG')
    count = len(logger.handlers)

    again = setup_logging(logging.WARNING)

    assert again is logger
    assert len(logger.handlers) == count
    assert logger.level == logging.WARNING


def test_setup_logging_unknown_level_falls_back_to_info():
    assert setup_logging('LOUD').level == logging.INFO

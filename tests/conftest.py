# -*- coding: utf-8 -*-
import logging

import pytest

from tablegrid.model import CallbackGenerators

from table_helpers import Marker


class CountingGenerators(CallbackGenerators):
    """생성한 gap 셀을 기록하는 생성기"""

    def __init__(self):
        self.created = []
        super().__init__(self._create)

    def _create(self):
        marker = Marker(f"gap{len(self.created)}")
        self.created.append(marker)
        return marker


@pytest.fixture()
def generators():
    return CountingGenerators()


@pytest.fixture(autouse=True)
def _reset_tablegrid_logger():
    # setup_logging이 붙인 핸들러를 테스트마다 정리
    logger = logging.getLogger('tablegrid')
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)

# -*- coding: utf-8 -*-
"""
빈 칸(gap) 셀 생성기

to_grid가 셀이 없는 위치를 채울 때 gap()을 위치마다 한 번 호출합니다.
반환된 요소는 검사하지 않고 그대로 출력에 넣습니다.
"""

from typing import Any, Callable


class Generators:
    """gap 셀 생성기 기본 클래스"""

    def gap(self) -> Any:
        """새 빈 셀 요소 생성"""
        raise NotImplementedError


class CallbackGenerators(Generators):
    """콜백 함수로 gap 셀을 생성"""

    def __init__(self, gap_callback: Callable[[], Any]):
        """
        Args:
            gap_callback: 인자 없이 새 셀 요소를 반환하는 함수
        """
        self._gap = gap_callback

    def gap(self) -> Any:
        return self._gap()

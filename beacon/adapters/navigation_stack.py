from __future__ import annotations

import logging
from typing import List

from beacon.domain.ports import Navigator
from beacon.domain.screens import Screen

LOGGER = logging.getLogger(__name__)


class StackNavigator(Navigator):
    """In-memory back stack of route names."""

    def __init__(self, start: Screen = Screen.CONCERT_PLANNER) -> None:
        self.back_stack: List[str] = [start.name]

    @property
    def current_route(self) -> str:
        return self.back_stack[-1]

    @property
    def current_screen(self) -> Screen:
        return Screen.from_or_default(self.current_route)

    def navigate(self, route: str) -> None:
        LOGGER.debug("Navigating %s -> %s", self.current_route, route)
        self.back_stack.append(route)

    def pop_back_stack(self) -> bool:
        """Drop the top route; the start route is never popped."""
        if len(self.back_stack) <= 1:
            return False
        self.back_stack.pop()
        return True

"""Registry of navigable screens and their display titles."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional


class Screen(Enum):
    CONCERT_PLANNER = "Planner"
    CONCERT_HISTORY = "Concert History"
    UPCOMING_EVENTS = "Upcoming Events"
    UTILITIES = "Utilities"
    USER_SETTINGS = "User Settings"
    EDIT_EVENT = "Edit Event"
    SELECT_VENUE = "Select Venue"
    SELECT_ARTIST = "Select Artist"
    CREATE_VENUE = "Create Venue"
    CREATE_ARTIST = "Create Artist"

    @property
    def title(self) -> str:
        return self.value

    @classmethod
    def from_title(cls, title: str) -> "Screen":
        """Return the screen with the given title.

        Raises:
            ValueError: If no screen carries ``title``.
        """
        for screen in cls:
            if screen.title == title:
                return screen
        raise ValueError(f"No screen found for title {title}")

    @classmethod
    def from_or_default(
        cls, name: Optional[str], default: Optional["Screen"] = None
    ) -> "Screen":
        """Resolve a stored route name, falling back to ``default`` (the planner)."""
        fallback = default if default is not None else cls.CONCERT_PLANNER
        if name is None:
            return fallback
        return cls.__members__.get(name, fallback)

    @classmethod
    def major_screens(cls) -> List["Screen"]:
        return [
            cls.CONCERT_HISTORY,
            cls.CONCERT_PLANNER,
            cls.UPCOMING_EVENTS,
            cls.UTILITIES,
        ]


__all__ = ["Screen"]

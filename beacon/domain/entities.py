from __future__ import annotations

"""Domain records shared across adapters, use-cases, and view models."""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class Artist:
    """Performer attached to an event; at most one per event is the headliner."""

    name: str
    genre: str
    headliner: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "genre": self.genre, "headliner": bool(self.headliner)}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Artist":
        if not isinstance(payload, Mapping):
            raise ValueError("Artist payload must be a mapping.")
        return cls(
            name=_require_str(payload, "name"),
            genre=_require_str(payload, "genre"),
            headliner=_optional_bool(payload, "headliner"),
        )


@dataclass
class Venue:
    """Location of an event."""

    name: str
    city: str
    state: str

    @classmethod
    def empty(cls) -> "Venue":
        return cls(name="", city="", state="")

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "city": self.city, "state": self.state}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Venue":
        if not isinstance(payload, Mapping):
            raise ValueError("Venue payload must be a mapping.")
        return cls(
            name=_require_str(payload, "name"),
            city=_require_str(payload, "city"),
            state=_require_str(payload, "state"),
        )


@dataclass
class Event:
    """A concert: its artists, date, venue, and whether tickets were bought.

    ``id`` is assigned by the repository and stays ``None`` for an event that
    has not been persisted yet.
    """

    artists: List[Artist]
    date: date
    venue: Venue
    purchased: bool = False
    id: Optional[str] = None

    @classmethod
    def new(cls, today: Optional[date] = None) -> "Event":
        """Return a blank event dated ``today`` (defaults to the current date)."""
        return cls(
            artists=[],
            date=today or date.today(),
            venue=Venue.empty(),
            purchased=False,
        )

    @property
    def headliner(self) -> Optional[Artist]:
        for artist in self.artists:
            if artist.headliner:
                return artist
        return None

    @property
    def openers(self) -> List[Artist]:
        return [artist for artist in self.artists if not artist.headliner]

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "artists": [artist.to_dict() for artist in self.artists],
            "date": self.date.isoformat(),
            "venue": self.venue.to_dict(),
            "purchased": bool(self.purchased),
        }
        if self.id is not None:
            payload["id"] = self.id
        return payload

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "Event":
        """Build an event from its JSON payload.

        Raises:
            ValueError: If a required key is missing or has the wrong shape.
        """
        if not isinstance(payload, Mapping):
            raise ValueError("Event payload must be a mapping.")
        raw_artists = payload.get("artists")
        if raw_artists is None:
            raw_artists = []
        if not isinstance(raw_artists, list):
            raise ValueError("Event artists must be a list.")
        raw_date = payload.get("date")
        if not isinstance(raw_date, str):
            raise ValueError("Event date must be an ISO date string.")
        try:
            parsed_date = date.fromisoformat(raw_date)
        except ValueError as exc:
            raise ValueError(f"Invalid event date '{raw_date}'.") from exc
        raw_id = payload.get("id")
        return cls(
            artists=[Artist.from_dict(item) for item in raw_artists],
            date=parsed_date,
            venue=Venue.from_dict(payload.get("venue") or {}),
            purchased=_optional_bool(payload, "purchased"),
            id=None if raw_id is None else str(raw_id),
        )


def _require_str(payload: Mapping[str, Any], key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string.")
    return value


def _optional_bool(payload: Mapping[str, Any], key: str, default: bool = False) -> bool:
    value = payload.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{key}' must be a boolean.")
    return value


__all__ = ["Artist", "Event", "Venue"]

from __future__ import annotations

import copy
from dataclasses import replace
from typing import Callable, Optional

from beacon.domain.entities import Artist
from beacon.domain.ports import Navigator
from beacon.domain.screens import Screen

from .observable import MutableStateFlow, StateFlow

OnSave = Callable[[Artist], None]


def _blank_artist() -> Artist:
    return Artist(name="", genre="")


class ArtistCreatorVM:
    """Draft artist for the create-artist screen plus the caller's save hook.

    No validation happens here; whoever passed ``on_save`` decides what to do
    with the draft.
    """

    def __init__(self) -> None:
        self._artist: MutableStateFlow[Artist] = MutableStateFlow(_blank_artist())
        self.artist_state: StateFlow[Artist] = self._artist.as_state_flow()
        self._on_save: OnSave = lambda artist: None

    def launch_creator(
        self,
        navigator: Navigator,
        artist: Optional[Artist] = None,
        *,
        on_save: OnSave,
    ) -> None:
        self._on_save = on_save
        self._artist.value = copy.copy(artist) if artist is not None else _blank_artist()
        navigator.navigate(Screen.CREATE_ARTIST.name)

    def update_name(self, name: str) -> None:
        self._artist.value = replace(self._artist.value, name=name)

    def update_genre(self, genre: str) -> None:
        self._artist.value = replace(self._artist.value, genre=genre)

    def on_save(self) -> None:
        self._on_save(self._artist.value)

from __future__ import annotations

from typing import List

from beacon.domain.entities import Artist
from beacon.tests.unit.viewmodels.helpers import RecordingNavigator
from beacon.viewmodels.artist_creator_vm import ArtistCreatorVM


def test_initial_draft_is_blank_and_save_is_noop() -> None:
    vm = ArtistCreatorVM()

    assert vm.artist_state.value == Artist(name="", genre="")
    vm.on_save()


def test_launch_creator_resets_draft_and_navigates() -> None:
    vm = ArtistCreatorVM()
    nav = RecordingNavigator()
    vm.update_name("leftover")

    vm.launch_creator(nav, on_save=lambda artist: None)

    assert vm.artist_state.value == Artist(name="", genre="")
    assert nav.routes == ["CREATE_ARTIST"]


def test_launch_creator_copies_supplied_artist() -> None:
    vm = ArtistCreatorVM()
    source = Artist(name="Phoebe", genre="Indie")

    vm.launch_creator(RecordingNavigator(), source, on_save=lambda artist: None)
    vm.update_genre("Folk")

    assert vm.artist_state.value == Artist(name="Phoebe", genre="Folk")
    assert source.genre == "Indie"


def test_on_save_passes_current_draft_to_callback() -> None:
    vm = ArtistCreatorVM()
    saved: List[Artist] = []
    vm.launch_creator(RecordingNavigator(), on_save=saved.append)

    vm.update_name("The Band")
    vm.update_genre("Blues")
    vm.on_save()

    assert saved == [Artist(name="The Band", genre="Blues")]


def test_relaunch_replaces_callback() -> None:
    vm = ArtistCreatorVM()
    first: List[Artist] = []
    second: List[Artist] = []
    vm.launch_creator(RecordingNavigator(), on_save=first.append)
    vm.launch_creator(RecordingNavigator(), Artist("X", "Y"), on_save=second.append)

    vm.on_save()

    assert first == []
    assert second == [Artist("X", "Y")]


def test_draft_changes_are_observable() -> None:
    vm = ArtistCreatorVM()
    seen: List[Artist] = []
    vm.artist_state.subscribe(seen.append)

    vm.update_name("A")
    vm.update_name("A")

    assert [artist.name for artist in seen] == ["", "A"]

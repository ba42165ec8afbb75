"""Composition root: builds adapters and view models from ``AppConfig``."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from beacon.adapters.event_repository_memory import InMemoryEventRepository
from beacon.adapters.event_rest import EventRestAdapter
from beacon.adapters.navigation_stack import StackNavigator
from beacon.app.config import AppConfig
from beacon.domain.ports import EventRepository
from beacon.utils.logging import apply_preferences, configure_root, level_name
from beacon.viewmodels.artist_creator_vm import ArtistCreatorVM
from beacon.viewmodels.event_editor_vm import EventEditorVM

LOGGER = logging.getLogger(__name__)


@dataclass
class BeaconApp:
    config: AppConfig
    repository: EventRepository
    navigator: StackNavigator
    event_editor: EventEditorVM
    artist_creator: ArtistCreatorVM


def build_app(
    config: AppConfig,
    *,
    repository: Optional[EventRepository] = None,
    navigator: Optional[StackNavigator] = None,
) -> BeaconApp:
    """Wire the app; without an API URL events come from an in-memory store."""
    configure_root()
    level = apply_preferences(config.debug_logging)
    LOGGER.debug("Log level set to %s", level_name(level))
    if repository is None:
        if config.api_base_url:
            repository = EventRestAdapter(
                config.api_base_url,
                api_key=config.api_key or None,
                request_timeout_s=config.request_timeout_s,
                retries=config.retries,
            )
        else:
            LOGGER.info("No API base URL configured, using in-memory events")
            repository = InMemoryEventRepository()
    return BeaconApp(
        config=config,
        repository=repository,
        navigator=navigator or StackNavigator(),
        event_editor=EventEditorVM(repository),
        artist_creator=ArtistCreatorVM(),
    )


__all__ = ["BeaconApp", "build_app"]

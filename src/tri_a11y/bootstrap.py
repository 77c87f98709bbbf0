"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path

from tri_a11y.application.persistence_bridge import STORAGE_KEY, PersistenceBridge
from tri_a11y.application.preference_store import PreferenceStore
from tri_a11y.application.toolbar_controller import ToolbarController
from tri_a11y.domain.ports.document_target import DocumentTargetPort
from tri_a11y.domain.ports.storage_port import KeyValueStoragePort
from tri_a11y.infrastructure.document.root_element import RootElement
from tri_a11y.infrastructure.storage.json_file_storage import JsonFileStorage


class Container:
    """Simple dependency injection container.

    Wires storage, persistence bridge, preference store and document
    target into a toolbar controller.

    Usage::

        container = Container()
        toolbar = container.toolbar()      # already hydrated
        toolbar.toggle_option("high_contrast")
    """

    def __init__(
        self,
        config_dir: str | Path | None = None,
        storage: KeyValueStoragePort | None = None,
        target: DocumentTargetPort | None = None,
    ) -> None:
        # -- Infrastructure singletons ---------------------------------------
        self._storage = storage or JsonFileStorage(
            Path(config_dir) if config_dir else None
        )
        self._target = target or RootElement()

        self._bridge = PersistenceBridge(self._storage, key=STORAGE_KEY)
        self._store = PreferenceStore()
        self._controller: ToolbarController | None = None

    # -- Port accessors ------------------------------------------------------

    @property
    def storage(self) -> KeyValueStoragePort:
        return self._storage

    @property
    def target(self) -> DocumentTargetPort:
        return self._target

    @property
    def bridge(self) -> PersistenceBridge:
        return self._bridge

    @property
    def store(self) -> PreferenceStore:
        return self._store

    # -- Controller factory --------------------------------------------------

    def toolbar(self) -> ToolbarController:
        """Return the (single) toolbar controller, mounted on first use."""
        if self._controller is None:
            self._controller = ToolbarController(self._store, self._bridge, self._target)
        self._controller.mount()
        return self._controller

"""Toolbar controller — the only mutator of preferences in response to user intent.

Lifecycle::

    controller = ToolbarController(store, bridge, target)
    controller.mount()              # hydrate from storage, then apply + persist
    controller.increase_font()      # apply markers, then save
    controller.reset()              # clear markers, then clear storage

Before :meth:`mount` completes, store changes are neither applied to the
document nor persisted, so the transient default state can never
overwrite a visitor's saved preferences.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from tri_a11y.application.persistence_bridge import PersistenceBridge
from tri_a11y.application.preference_store import PreferenceStore
from tri_a11y.domain.errors import UnknownPreferenceError
from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing, Marker, Visibility
from tri_a11y.domain.models.preferences import (
    FONT_STEP_MAX,
    FONT_STEP_MIN,
    TOGGLE_FIELDS,
    PreferenceState,
)
from tri_a11y.domain.ports.document_target import DocumentTargetPort
from tri_a11y.domain.services.style_application import apply_state

logger = logging.getLogger(__name__)


class ToolbarController:
    """Visibility state machine plus preference intents."""

    def __init__(
        self,
        store: PreferenceStore,
        bridge: PersistenceBridge,
        target: DocumentTargetPort,
    ) -> None:
        self._store = store
        self._bridge = bridge
        self._target = target
        self._visibility = Visibility.CLOSED
        self._mounted = False
        self._applied: frozenset[Marker] = frozenset()
        self._unsubscribe: Callable[[], None] | None = self._store.subscribe(self._on_change)

    # -- Lifecycle -----------------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> PreferenceState:
        """Hydrate from storage once, then apply and persist the result."""
        if self._mounted:
            return self._store.state
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self._on_change)
        loaded = self._bridge.load()
        self._mounted = True
        self._store.replace(loaded)
        logger.debug("Toolbar mounted with %s", loaded.to_storage())
        return loaded

    def unmount(self) -> None:
        """Detach from the store; markers already applied stay in place."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self._mounted = False

    def _on_change(self, state: PreferenceState) -> None:
        if not self._mounted:
            return
        self._applied = apply_state(state, self._target)
        self._bridge.save(state)

    # -- Visibility ----------------------------------------------------------

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    @property
    def is_open(self) -> bool:
        return self._visibility is Visibility.OPEN

    def toggle(self) -> Visibility:
        """Trigger-button activation."""
        self._visibility = Visibility.CLOSED if self.is_open else Visibility.OPEN
        return self._visibility

    def open(self) -> None:
        self._visibility = Visibility.OPEN

    def close(self) -> None:
        self._visibility = Visibility.CLOSED

    def dismiss_backdrop(self) -> None:
        self.close()

    # -- Read model ----------------------------------------------------------

    @property
    def state(self) -> PreferenceState:
        return self._store.state

    @property
    def applied_markers(self) -> frozenset[Marker]:
        return self._applied

    @property
    def has_changes(self) -> bool:
        return not self._store.state.is_default

    @property
    def can_increase_font(self) -> bool:
        return self._store.state.font_step < FONT_STEP_MAX

    @property
    def can_decrease_font(self) -> bool:
        return self._store.state.font_step > FONT_STEP_MIN

    @property
    def font_scale_label(self) -> str:
        return self._store.state.font_scale

    # -- Intents -------------------------------------------------------------

    def update(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> PreferenceState:
        return self._store.update(patch, **fields)

    def increase_font(self) -> PreferenceState:
        return self._store.update(font_step=self._store.state.font_step + 1)

    def decrease_font(self) -> PreferenceState:
        return self._store.update(font_step=self._store.state.font_step - 1)

    def set_font_step(self, step: int) -> PreferenceState:
        return self._store.update(font_step=step)

    def set_line_spacing(self, value: LineSpacing | str) -> PreferenceState:
        return self._store.update(line_spacing=value)

    def set_letter_spacing(self, value: LetterSpacing | str) -> PreferenceState:
        return self._store.update(letter_spacing=value)

    def toggle_option(self, name: str) -> PreferenceState:
        """Flip one of the boolean options (``high_contrast``, ``grayscale``...)."""
        if name not in TOGGLE_FIELDS:
            raise UnknownPreferenceError(f"Not a toggle option: {name!r}")
        return self._store.update({name: not getattr(self._store.state, name)})

    def reset(self) -> PreferenceState:
        """Restore defaults, clear markers and drop the persisted copy.

        The slot is cleared even before :meth:`mount`, so a later hydration
        cannot bring back preferences the visitor has reset.
        """
        state = self._store.reset()
        self._bridge.clear()
        return state

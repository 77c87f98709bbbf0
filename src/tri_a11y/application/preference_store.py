"""In-memory holder of the current PreferenceState.

The store owns no side effects: the document and persistence react to
changes through observers registered with :meth:`PreferenceStore.subscribe`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from tri_a11y.domain.models.preferences import PreferenceState

Observer = Callable[[PreferenceState], None]


class PreferenceStore:
    """Current preferences plus a single mutation primitive."""

    def __init__(self, initial: PreferenceState | None = None) -> None:
        self._state = initial or PreferenceState()
        self._observers: list[Observer] = []

    @property
    def state(self) -> PreferenceState:
        return self._state

    def update(self, patch: Mapping[str, Any] | None = None, **fields: Any) -> PreferenceState:
        """Merge *patch* (and/or keyword fields) over the current state.

        Unspecified fields keep their value; ``font_step`` saturates at the
        edges of its range.
        """
        merged = {**(patch or {}), **fields}
        self._set(self._state.patched(merged))
        return self._state

    def reset(self) -> PreferenceState:
        """Replace the state with a fresh default record."""
        self._set(PreferenceState())
        return self._state

    def replace(self, state: PreferenceState) -> None:
        """Swap in a complete state (used by hydration)."""
        self._set(state)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register *observer*; returns a callable that unregisters it."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    # -- Internal ------------------------------------------------------------

    def _set(self, state: PreferenceState) -> None:
        self._state = state
        for observer in list(self._observers):
            observer(state)

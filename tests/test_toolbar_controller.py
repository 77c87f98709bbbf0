"""Tests for the preference store and the toolbar controller."""

from __future__ import annotations

import json

import pytest

from tri_a11y.application.persistence_bridge import STORAGE_KEY, PersistenceBridge
from tri_a11y.application.preference_store import PreferenceStore
from tri_a11y.application.toolbar_controller import ToolbarController
from tri_a11y.bootstrap import Container
from tri_a11y.domain.errors import UnknownPreferenceError
from tri_a11y.domain.models.enums import LetterSpacing, LineSpacing, Marker, Visibility
from tri_a11y.domain.models.preferences import TOGGLE_FIELDS, PreferenceState
from tri_a11y.infrastructure.document.root_element import RootElement
from tri_a11y.infrastructure.storage.memory_storage import MemoryStorage


# ── Helpers ───────────────────────────────────────────────────────────────


def _stored(storage: MemoryStorage) -> dict | None:
    raw = storage.get_item(STORAGE_KEY)
    return json.loads(raw) if raw is not None else None


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def root() -> RootElement:
    return RootElement()


@pytest.fixture()
def controller(storage: MemoryStorage, root: RootElement) -> ToolbarController:
    return ToolbarController(PreferenceStore(), PersistenceBridge(storage), root)


# ═══════════════════════════════════════════════════════════════════════════
# Preference store
# ═══════════════════════════════════════════════════════════════════════════


class TestPreferenceStore:
    def test_update_merges(self) -> None:
        store = PreferenceStore()
        store.update({"font_step": 2})
        store.update(high_contrast=True)
        assert store.state == PreferenceState(font_step=2, high_contrast=True)

    def test_update_saturates(self) -> None:
        store = PreferenceStore()
        assert store.update(font_step=-3).font_step == 0
        assert store.update(font_step=7).font_step == 4

    def test_reset(self) -> None:
        store = PreferenceStore(PreferenceState(grayscale=True))
        store.reset()
        assert store.state.is_default

    def test_observers_see_every_change(self) -> None:
        store = PreferenceStore()
        seen: list[PreferenceState] = []
        unsubscribe = store.subscribe(seen.append)
        store.update(font_step=1)
        store.reset()
        unsubscribe()
        store.update(font_step=3)
        assert [s.font_step for s in seen] == [1, 0]

    def test_failed_update_notifies_nobody(self) -> None:
        store = PreferenceStore()
        seen: list[PreferenceState] = []
        store.subscribe(seen.append)
        with pytest.raises(UnknownPreferenceError):
            store.update(dark_mode=True)
        assert seen == []
        assert store.state.is_default


# ═══════════════════════════════════════════════════════════════════════════
# Visibility
# ═══════════════════════════════════════════════════════════════════════════


class TestVisibility:
    def test_starts_closed(self, controller: ToolbarController) -> None:
        assert controller.visibility is Visibility.CLOSED
        assert controller.is_open is False

    def test_toggle(self, controller: ToolbarController) -> None:
        assert controller.toggle() is Visibility.OPEN
        assert controller.toggle() is Visibility.CLOSED

    def test_backdrop_and_close_force_closed(self, controller: ToolbarController) -> None:
        controller.open()
        controller.dismiss_backdrop()
        assert not controller.is_open
        controller.open()
        controller.close()
        assert not controller.is_open
        controller.close()
        assert not controller.is_open

    def test_visibility_is_not_persisted(
        self, controller: ToolbarController, storage: MemoryStorage
    ) -> None:
        controller.mount()
        controller.open()
        assert "open" not in (storage.get_item(STORAGE_KEY) or "")
        assert set(_stored(storage) or {}) == set(PreferenceState().to_storage())


# ═══════════════════════════════════════════════════════════════════════════
# Hydration
# ═══════════════════════════════════════════════════════════════════════════


class TestHydration:
    def test_changes_before_mount_are_not_persisted_or_applied(
        self, controller: ToolbarController, storage: MemoryStorage, root: RootElement
    ) -> None:
        storage.set_item(STORAGE_KEY, json.dumps({"highContrast": True}))
        controller.update(font_step=2)
        assert _stored(storage) == {"highContrast": True}
        assert root.markers == frozenset()

    def test_mount_restores_saved_preferences(
        self, controller: ToolbarController, storage: MemoryStorage, root: RootElement
    ) -> None:
        storage.set_item(STORAGE_KEY, json.dumps({"fontStep": 3, "highlightLinks": True}))
        state = controller.mount()
        assert state == PreferenceState(font_step=3, highlight_links=True)
        assert root.markers == {"a11y-text-3", "a11y-links"}

    def test_mount_does_not_overwrite_saved_preferences_with_defaults(
        self, controller: ToolbarController, storage: MemoryStorage
    ) -> None:
        storage.set_item(STORAGE_KEY, json.dumps({"grayscale": True}))
        controller.mount()
        assert _stored(storage)["grayscale"] is True

    def test_mount_is_idempotent(
        self, controller: ToolbarController, storage: MemoryStorage
    ) -> None:
        controller.mount()
        controller.update(font_step=1)
        storage.set_item(STORAGE_KEY, json.dumps({"fontStep": 4}))
        assert controller.mount().font_step == 1

    def test_unmount_stops_applying(
        self, controller: ToolbarController, root: RootElement
    ) -> None:
        controller.mount()
        controller.update(high_contrast=True)
        controller.unmount()
        controller.update(grayscale=True)
        assert root.markers == {"a11y-contrast"}

    def test_remount_resubscribes(
        self, controller: ToolbarController, root: RootElement
    ) -> None:
        controller.mount()
        controller.unmount()
        controller.mount()
        controller.update(reduce_motion=True)
        assert "a11y-no-motion" in root.markers

    def test_deeply_nested_storage_hydrates_defaults(
        self, controller: ToolbarController, storage: MemoryStorage, root: RootElement
    ) -> None:
        storage.set_item(STORAGE_KEY, '{"a":' * 200000)
        assert controller.mount() == PreferenceState()
        assert root.markers == frozenset()

    def test_reset_before_mount_clears_slot(
        self, controller: ToolbarController, storage: MemoryStorage
    ) -> None:
        storage.set_item(STORAGE_KEY, json.dumps({"highContrast": True}))
        controller.reset()
        assert STORAGE_KEY not in storage
        assert controller.mount() == PreferenceState()

    def test_corrupt_storage_hydrates_defaults(
        self, controller: ToolbarController, storage: MemoryStorage, root: RootElement
    ) -> None:
        storage.set_item(STORAGE_KEY, "{{broken")
        assert controller.mount() == PreferenceState()
        assert root.markers == frozenset()


# ═══════════════════════════════════════════════════════════════════════════
# Intents
# ═══════════════════════════════════════════════════════════════════════════


class TestIntents:
    @pytest.fixture(autouse=True)
    def _mounted(self, controller: ToolbarController) -> None:
        controller.mount()

    def test_every_change_is_applied_and_saved(
        self, controller: ToolbarController, storage: MemoryStorage, root: RootElement
    ) -> None:
        controller.set_line_spacing(LineSpacing.RELAXED)
        assert root.markers == {"a11y-line-relaxed"}
        assert _stored(storage)["lineSpacing"] == "relaxed"

        controller.set_letter_spacing("wider")
        assert root.markers == {"a11y-line-relaxed", "a11y-letters-wider"}
        assert _stored(storage)["letterSpacing"] == "wider"

    def test_font_steps_saturate(self, controller: ToolbarController) -> None:
        assert controller.can_decrease_font is False
        controller.decrease_font()
        assert controller.state.font_step == 0

        for _ in range(6):
            controller.increase_font()
        assert controller.state.font_step == 4
        assert controller.can_increase_font is False
        assert controller.font_scale_label == "150%"

    def test_set_font_step_clamps(self, controller: ToolbarController) -> None:
        assert controller.set_font_step(-3).font_step == 0
        assert controller.set_font_step(7).font_step == 4

    @pytest.mark.parametrize("name", TOGGLE_FIELDS)
    def test_toggle_option_flips(self, controller: ToolbarController, name: str) -> None:
        assert getattr(controller.toggle_option(name), name) is True
        assert getattr(controller.toggle_option(name), name) is False

    def test_toggle_option_rejects_non_toggles(self, controller: ToolbarController) -> None:
        with pytest.raises(UnknownPreferenceError):
            controller.toggle_option("font_step")

    def test_has_changes(self, controller: ToolbarController) -> None:
        assert controller.has_changes is False
        controller.toggle_option("enhanced_focus")
        assert controller.has_changes is True
        controller.reset()
        assert controller.has_changes is False

    def test_applied_markers(self, controller: ToolbarController) -> None:
        controller.update(font_step=2, high_contrast=True)
        assert controller.applied_markers == {Marker.TEXT_2, Marker.CONTRAST}

    def test_storage_failure_never_surfaces(self, root: RootElement) -> None:
        controller = ToolbarController(
            PreferenceStore(), PersistenceBridge(MemoryStorage(disabled=True)), root
        )
        controller.mount()
        controller.update(grayscale=True)
        controller.reset()
        assert root.markers == frozenset()


# ═══════════════════════════════════════════════════════════════════════════
# End-to-end scenarios
# ═══════════════════════════════════════════════════════════════════════════


class TestScenarios:
    def test_fresh_visitor_has_no_markers(self) -> None:
        container = Container(storage=MemoryStorage())
        toolbar = container.toolbar()
        assert toolbar.state == PreferenceState()
        assert container.target.markers == frozenset()

    def test_step_two_with_high_contrast(self) -> None:
        container = Container(storage=MemoryStorage())
        container.toolbar().update({"font_step": 2, "high_contrast": True})
        assert container.target.markers == {"a11y-text-2", "a11y-contrast"}

    def test_reset_after_several_mutations(self) -> None:
        storage = MemoryStorage()
        container = Container(storage=storage)
        toolbar = container.toolbar()
        toolbar.increase_font()
        toolbar.set_letter_spacing(LetterSpacing.WIDE)
        toolbar.toggle_option("invert_colors")
        toolbar.toggle_option("reduce_motion")

        toolbar.reset()

        assert STORAGE_KEY not in storage
        assert toolbar.state == PreferenceState()
        assert container.target.markers == frozenset()

    def test_preferences_survive_a_new_session(self) -> None:
        storage = MemoryStorage()
        Container(storage=storage).toolbar().update(font_step=1, enhanced_focus=True)

        second = Container(storage=storage)
        assert second.toolbar().state == PreferenceState(font_step=1, enhanced_focus=True)
        assert second.target.markers == {"a11y-text-1", "a11y-focus"}

    def test_container_toolbar_is_shared(self) -> None:
        container = Container(storage=MemoryStorage())
        assert container.toolbar() is container.toolbar()

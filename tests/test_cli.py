"""Tests for the Typer CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from tri_a11y.application.persistence_bridge import STORAGE_KEY
from tri_a11y.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture()
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "cfg"


def _invoke(config_dir: Path, *args: str):
    return runner.invoke(app, ["--config-dir", str(config_dir), *args])


def _stored(config_dir: Path) -> dict:
    return json.loads((config_dir / f"{STORAGE_KEY}.json").read_text(encoding="utf-8"))


class TestCli:
    def test_markers_empty_by_default(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "markers")
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_set_persists_and_applies(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "set", "--font-step", "2", "--high-contrast")
        assert result.exit_code == 0, result.output
        assert _stored(config_dir)["fontStep"] == 2
        assert _stored(config_dir)["highContrast"] is True

        result = _invoke(config_dir, "markers")
        assert set(result.output.split()) == {"a11y-text-2", "a11y-contrast"}

    def test_set_saturates_font_step(self, config_dir: Path) -> None:
        _invoke(config_dir, "set", "--font-step", "9")
        assert _stored(config_dir)["fontStep"] == 4

    def test_set_spacing_enums(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "set", "--line-spacing", "loose", "--letter-spacing", "wide")
        assert result.exit_code == 0, result.output
        assert _stored(config_dir)["lineSpacing"] == "loose"
        assert _stored(config_dir)["letterSpacing"] == "wide"

    def test_set_without_options_fails(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "set")
        assert result.exit_code == 1

    def test_bigger_and_smaller(self, config_dir: Path) -> None:
        _invoke(config_dir, "bigger")
        result = _invoke(config_dir, "bigger")
        assert "125%" in result.output
        _invoke(config_dir, "smaller")
        assert _stored(config_dir)["fontStep"] == 1

    def test_toggle_accepts_dashed_names(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "toggle", "reduce-motion")
        assert result.exit_code == 0, result.output
        assert _stored(config_dir)["reduceMotion"] is True

    def test_toggle_unknown_name(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "toggle", "dark-mode")
        assert result.exit_code == 1

    def test_reset_clears_slot(self, config_dir: Path) -> None:
        _invoke(config_dir, "set", "--grayscale")
        result = _invoke(config_dir, "reset")
        assert result.exit_code == 0
        assert not (config_dir / f"{STORAGE_KEY}.json").exists()

    def test_show(self, config_dir: Path) -> None:
        _invoke(config_dir, "set", "--highlight-links")
        result = _invoke(config_dir, "show")
        assert result.exit_code == 0
        assert "Highlight Links" in result.output
        assert "a11y-links" in result.output

    def test_css_plain(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "css", "--plain")
        assert result.exit_code == 0
        assert "html.a11y-contrast {" in result.output

    def test_path(self, config_dir: Path) -> None:
        result = _invoke(config_dir, "path")
        assert result.output.strip() == str(config_dir / f"{STORAGE_KEY}.json")

    def test_corrupt_slot_is_tolerated(self, config_dir: Path) -> None:
        config_dir.mkdir(parents=True)
        (config_dir / f"{STORAGE_KEY}.json").write_text("{{nope", encoding="utf-8")
        result = _invoke(config_dir, "markers")
        assert result.exit_code == 0
        assert result.output.strip() == ""

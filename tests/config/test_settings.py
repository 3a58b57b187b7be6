"""Tests for MdBulletsSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from mdbullets.config.settings import MdBulletsSettings


class TestSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = MdBulletsSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.bullets.style == "automatic"
        assert settings.render.width == 100

    def test_frozen(self, tmp_path: Path) -> None:
        settings = MdBulletsSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "mdbullets.toml"
        toml.write_text('[bullets]\nstyle = "ascii"\n[render]\nwidth = 64\n')
        settings = MdBulletsSettings.from_cli(start=tmp_path)
        assert settings.bullets.style == "ascii"
        assert settings.bullets.text_scale == 1.0  # default preserved
        assert settings.render.width == 64
        assert settings.config_path == toml

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[bullets]\nstyle = "arrow"\n')
        settings = MdBulletsSettings.from_cli(config_path=str(custom), start=tmp_path)
        assert settings.bullets.style == "arrow"
        assert settings.config_path == custom

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "mdbullets.toml").write_text("[bullets\nstyle = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            MdBulletsSettings.from_cli(start=tmp_path)


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "mdbullets.toml").write_text('[bullets]\nstyle = "ascii"\n')
        monkeypatch.setenv("MDBULLETS_BULLETS__STYLE", "hollow")
        settings = MdBulletsSettings.from_cli(start=tmp_path)
        assert settings.bullets.style == "hollow"

    def test_nested_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MDBULLETS_RENDER__WIDTH", "50")
        settings = MdBulletsSettings.from_cli(start=tmp_path)
        assert settings.render.width == 50

    def test_infinite_text_scale_rejected(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MDBULLETS_BULLETS__TEXT_SCALE", "inf")
        with pytest.raises(ValidationError):
            MdBulletsSettings.from_cli(start=tmp_path)


class TestCliFlags:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = MdBulletsSettings.from_cli(
            start=tmp_path, json_output=True, verbose=True, log_json=True
        )
        assert settings.json_output is True
        assert settings.verbose is True
        assert settings.log_json is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "mdbullets.toml").write_text("verbose = true\n")
        settings = MdBulletsSettings.from_cli(start=tmp_path, verbose=False)
        assert settings.verbose is False

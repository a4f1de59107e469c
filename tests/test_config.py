"""Tests for application configuration."""

from __future__ import annotations

from authserver.core.config import Settings


class TestSettings:
    def test_default_settings(self) -> None:
        s = Settings(_env_file=None)
        assert s.debug is False
        assert s.stylesheet_name == "stylesheet.css"
        assert s.default_locale in s.available_locales
        assert (s.content_dir / "default" / "stylesheet.css").is_file()

    def test_locale_order_preserved(self) -> None:
        s = Settings(_env_file=None, available_locales={"en": "English", "fr": "Français"})
        assert list(s.available_locales) == ["en", "fr"]

    def test_is_testing(self) -> None:
        assert Settings(_env_file=None, environment="testing").is_testing
        assert not Settings(_env_file=None, environment="production").is_testing

"""Tests for AppSettings."""

import pytest
from pydantic import ValidationError

from core.config import AppSettings
from core.domain.principle import Principle


class TestAppSettings:
    """Environment-driven configuration."""

    def test_defaults(self):
        """All principles, banner on, styled output, WARNING logs."""
        settings = AppSettings()

        assert settings.principles == list(Principle)
        assert settings.show_banner is True
        assert settings.styled_output is True
        assert settings.log_level == "WARNING"

    def test_principles_from_comma_list(self, monkeypatch):
        """Comma separated names are parsed."""
        monkeypatch.setenv("SOLID_SHOWCASE_PRINCIPLES", "dip, SRP")

        assert AppSettings().principles == [Principle.DIP, Principle.SRP]

    def test_principles_from_json_list(self, monkeypatch):
        """JSON arrays are accepted too."""
        monkeypatch.setenv("SOLID_SHOWCASE_PRINCIPLES", '["lsp", "isp"]')

        assert AppSettings().principles == [Principle.LSP, Principle.ISP]

    def test_unknown_principle_rejected(self, monkeypatch):
        """Validation happens at the edge."""
        monkeypatch.setenv("SOLID_SHOWCASE_PRINCIPLES", "srp,yagni")

        with pytest.raises(ValidationError):
            AppSettings()

    def test_log_level_normalised(self, monkeypatch):
        """Case-insensitive level names."""
        monkeypatch.setenv("SOLID_SHOWCASE_LOG_LEVEL", "debug")

        assert AppSettings().log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        """Unknown levels are rejected."""
        monkeypatch.setenv("SOLID_SHOWCASE_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError):
            AppSettings()

    def test_reads_dotenv(self, tmp_path):
        """A .env in the working directory is honoured."""
        (tmp_path / ".env").write_text("SOLID_SHOWCASE_SHOW_BANNER=false\n", encoding="utf-8")

        assert AppSettings().show_banner is False

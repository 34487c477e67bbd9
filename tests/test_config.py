# =============================================================================
# test_config.py - REPL Configuration Tests
# =============================================================================

from monkeyi.config import PROMPT, ReplConfig


class TestDefaults:
    """Test default configuration values."""

    def test_defaults(self):
        config = ReplConfig()
        assert config.prompt == PROMPT == ">> "
        assert config.show_offsets is False
        assert config.echo_illegal_warnings is False


class TestFromEnv:
    """Test environment variable overrides."""

    def test_no_environment(self, monkeypatch):
        for name in ("MONKEYI_PROMPT", "MONKEYI_SHOW_OFFSETS", "MONKEYI_WARN_ILLEGAL"):
            monkeypatch.delenv(name, raising=False)
        assert ReplConfig.from_env() == ReplConfig()

    def test_prompt(self, monkeypatch):
        monkeypatch.setenv("MONKEYI_PROMPT", "? ")
        assert ReplConfig.from_env().prompt == "? "

    def test_empty_prompt_allowed(self, monkeypatch):
        monkeypatch.setenv("MONKEYI_PROMPT", "")
        assert ReplConfig.from_env().prompt == ""

    def test_truthy_flags(self, monkeypatch):
        monkeypatch.setenv("MONKEYI_SHOW_OFFSETS", "yes")
        monkeypatch.setenv("MONKEYI_WARN_ILLEGAL", "TRUE")
        config = ReplConfig.from_env()
        assert config.show_offsets is True
        assert config.echo_illegal_warnings is True

    def test_falsy_flag(self, monkeypatch):
        monkeypatch.setenv("MONKEYI_SHOW_OFFSETS", "0")
        assert ReplConfig.from_env().show_offsets is False

    def test_invalid_flag_ignored(self, monkeypatch):
        monkeypatch.setenv("MONKEYI_SHOW_OFFSETS", "maybe")
        assert ReplConfig.from_env().show_offsets is False

"""
REPL Configuration
==================

Settings for the interactive token printer. Configuration can come from:
- Default values (defined here)
- Environment variables (``ReplConfig.from_env()``)
- Command-line options (applied on top by the CLI)
"""

from dataclasses import dataclass
import os


PROMPT = ">> "

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def _parse_flag(value: str) -> bool | None:
    """Interpret an environment flag; None when the value is not recognised."""
    value = value.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    return None


@dataclass
class ReplConfig:
    """
    Configuration for the token-printing REPL.

    Attributes:
        prompt: Text written before each line is read (default: ">> ")
        show_offsets: Prefix each token with its byte offset (default: False)
        echo_illegal_warnings: Write a warning line for every ILLEGAL token
            (default: False)
    """

    prompt: str = PROMPT
    show_offsets: bool = False
    echo_illegal_warnings: bool = False

    @classmethod
    def from_env(cls) -> "ReplConfig":
        """
        Create ReplConfig from environment variables.

        Environment variables (all optional):
            MONKEYI_PROMPT: Prompt text
            MONKEYI_SHOW_OFFSETS: Show byte offsets (1/true/yes/on)
            MONKEYI_WARN_ILLEGAL: Warn on ILLEGAL tokens (1/true/yes/on)

        Unrecognised flag values are ignored.
        """
        config = cls()

        if (prompt := os.environ.get("MONKEYI_PROMPT")) is not None:
            config.prompt = prompt

        if show_offsets := os.environ.get("MONKEYI_SHOW_OFFSETS"):
            flag = _parse_flag(show_offsets)
            if flag is not None:
                config.show_offsets = flag

        if warn_illegal := os.environ.get("MONKEYI_WARN_ILLEGAL"):
            flag = _parse_flag(warn_illegal)
            if flag is not None:
                config.echo_illegal_warnings = flag

        return config

"""ContextVar-based scan configuration for splitmatter.

Selects which frontmatter formats the scanner recognizes. Config is read
once when a Scanner is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from splitmatter.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(json_enabled=False)):
        doc = split(source)  # a leading "{" is now plain content

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        toml_enabled: Recognize ``+++`` TOML frontmatter
        yaml_enabled: Recognize ``---`` YAML frontmatter
        json_enabled: Recognize ``{...}`` JSON frontmatter

    A disabled format is not an error: its opening character is treated
    like any other first character and the whole input becomes content.

    """

    toml_enabled: bool = True
    yaml_enabled: bool = True
    json_enabled: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"json_enabled": False, "other": 1})
            >>> config.json_enabled
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(toml_enabled=False)):
        ...     items = list(lex("+++\\nA\\n+++\\n"))
        >>> # Previous config is back in effect

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]

"""ContextVar-based highlight configuration for codetint.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The configuration decides how tagged tokens are rendered: the class-name
prefix, the scope suffix appended to every class name, and the container
element wrapped around each token.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from codetint.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(suffix="_a1")):
        html = annotate("let x = 1;", "js")

"""

from __future__ import annotations

import secrets
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

# token_hex(6) yields 12 hex characters; suffix length never varies
SCOPE_SUFFIX_BYTES = 6


def new_scope_suffix() -> str:
    """Generate a scope suffix unique to one rendered instance.

    Returns:
        A string of the form ``_<12 hex digits>``, safe to append to a
        CSS class name.

    Example:
        >>> suffix = new_scope_suffix()
        >>> len(suffix)
        13
    """
    return "_" + secrets.token_hex(SCOPE_SUFFIX_BYTES)


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable rendering configuration.

    Attributes:
        prefix: Leading part of every emitted class name
        suffix: Scope suffix appended to every emitted class name
        tag: Element name used as the token container

    """

    prefix: str = "hlc"
    suffix: str = ""
    tag: str = "span"

    @classmethod
    def from_dict(cls, config_dict: dict) -> HighlightConfig:
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                HighlightConfig attribute names.

        Returns:
            New HighlightConfig instance with values from dict.

        Example:
            >>> config = HighlightConfig.from_dict({"suffix": "_x", "theme": "dark"})
            >>> config.suffix
            '_x'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def class_name(self, fragment: str) -> str:
        """Build the full class name for a ``namespace_kind`` fragment."""
        return f"{self.prefix}_{fragment}{self.suffix}"


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.

    """
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: HighlightConfig to use within the context.

    Yields:
        None

    Example:
        >>> with highlight_config_context(HighlightConfig(prefix="x")):
        ...     get_highlight_config().prefix
        'x'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "get_highlight_config",
    "highlight_config_context",
    "new_scope_suffix",
    "reset_highlight_config",
    "set_highlight_config",
]

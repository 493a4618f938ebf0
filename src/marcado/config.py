"""ContextVar-based render configuration for Marcado.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Documents and elements read the active config at render time, so the same
tree can be rendered under different settings in different threads.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from marcado.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(separator="")):
        html = document.render()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields

# https://html.spec.whatwg.org/multipage/syntax.html#void-elements plus keygen
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        separator: String placed between the rendered children of a document
            whose own ``separator`` is None
        void_elements: Tags rendered without content and closing tag
        warn_on_void_content: Log a warning when a void element holding
            content is rendered (the content is dropped either way)

    """

    separator: str = "\n"
    void_elements: frozenset[str] = VOID_ELEMENTS
    warn_on_void_content: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored. ``void_elements`` may be any iterable of tags.

        Example:
            >>> config = RenderConfig.from_dict({"separator": "", "unknown": 1})
            >>> config.separator
            ''

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "void_elements" in filtered:
            filtered["void_elements"] = frozenset(filtered["void_elements"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(separator=" ")):
        ...     get_render_config().separator
        ' '

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "VOID_ELEMENTS",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]

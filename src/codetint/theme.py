"""Theme tables and stylesheet generation.

A theme maps a namespace (``container``, ``html``, ``ts``, ``css``) to
token styles, each a mapping of camelCase style properties to values.
Themes are plain data supplied by the caller; ``DARK_THEME`` and
``LIGHT_THEME`` are the built-in presets.

The render layer selects elements by class name, so a theme is turned into
CSS rules keyed by the same class names the HtmlRenderer emits.

Example:
    >>> css = render_stylesheet("dark", suffix="_a1", namespaces=("css",))
    >>> ".hlc_css_selector_a1" in css
    True
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from codetint.errors import ThemeError
from codetint.stringbuilder import StringBuilder
from codetint.tokens import MarkupToken, ScriptToken, StyleToken, TokenKind
from codetint.utils.logger import get_logger
from codetint.utils.text import camel_to_kebab

logger = get_logger(__name__)

Theme = Mapping[str, Mapping[str, Any]]

# Kinds styled from each theme table, keyed by theme key
THEME_KINDS: dict[str, dict[str, TokenKind]] = {
    "html": {
        kind.theme_key: kind
        for kind in MarkupToken
        if kind is not MarkupToken.STYLE_COMMENT
    },
    "ts": {kind.theme_key: kind for kind in ScriptToken},
    "css": {kind.theme_key: kind for kind in StyleToken},
}

RECOGNIZED_OPTIONS: dict[str, frozenset[str]] = {
    namespace: frozenset(kinds) for namespace, kinds in THEME_KINDS.items()
}

DARK_THEME: dict[str, dict[str, Any]] = {
    "container": {
        "display": "flex",
        "backgroundColor": "#111111",
        "color": "#FFFFFF",
        "fontFamily": "Consolas, Monaco, 'Andale Mono', 'Ubuntu Mono', monospace",
        "borderRadius": "8px",
        "padding": "10px",
        "overflowX": "auto",
        "width": "100%",
        "height": "100%",
    },
    "html": {
        "string": {"color": "rgb(245, 192, 112)"},
        "function": {"color": "rgb(255, 223, 82)"},
        "parentheses": {"color": "rgb(188, 252, 255)"},
        "operator": {"color": "rgb(170, 139, 255)"},
        "tagName": {"color": "rgb(170, 139, 255)"},
        "comment": {"color": "rgb(144, 144, 144)"},
        "php_variable": {"color": "rgb(166, 211, 255)"},
    },
    "ts": {
        "keyword": {"color": "rgb(35, 145, 255)"},
        "function": {"color": "rgb(255, 223, 82)"},
        "class": {"color": "rgb(107, 255, 225)"},
        "type": {"color": "rgb(117, 252, 173)"},
        "string": {"color": "rgb(245, 192, 112)"},
        "number": {"color": "rgb(255, 140, 0)"},
        "comment": {"color": "rgb(144, 144, 144)"},
        "operator": {"color": "rgb(255, 121, 121)"},
        "parentheses": {"color": "rgb(255, 233, 168)"},
        "brackets": {"color": "rgb(201, 254, 128)"},
        "braces": {"color": "rgb(255, 136, 237)"},
    },
    "css": {
        "function": {"color": "rgb(255, 223, 82)"},
        "string": {"color": "rgb(245, 192, 112)"},
        "number": {"color": "rgb(255, 140, 0)"},
        "comment": {"color": "rgb(144, 144, 144)"},
        "parentheses": {"color": "rgb(255, 233, 168)"},
        "brackets": {"color": "rgb(201, 254, 128)"},
        "braces": {"color": "rgb(255, 136, 237)"},
        "selector": {"color": "rgb(255, 203, 168)"},
        "value": {"color": "rgb(230, 142, 99)"},
    },
}

LIGHT_THEME: dict[str, dict[str, Any]] = {
    "container": {
        **DARK_THEME["container"],
        "backgroundColor": "rgb(207, 207, 207)",
        "color": "rgb(0, 0, 0)",
    },
    "html": {
        "string": {"color": "rgb(127, 74, 31)"},
        "function": {"color": "rgb(138, 107, 18)"},
        "parentheses": {"color": "rgb(29, 109, 140)"},
        "operator": {"color": "rgb(23, 77, 143)"},
        "tagName": {"color": "rgb(23, 77, 143)"},
        "comment": {"color": "rgb(96, 96, 96)"},
        "php_variable": {"color": "rgb(44, 111, 191)"},
    },
    "ts": {
        "keyword": {"color": "rgb(61, 0, 128)"},
        "function": {"color": "rgb(138, 107, 18)"},
        "class": {"color": "rgb(0, 102, 0)"},
        "type": {"color": "rgb(0, 128, 0)"},
        "string": {"color": "rgb(111, 111, 0)"},
        "number": {"color": "rgb(102, 26, 26)"},
        "comment": {"color": "rgb(96, 96, 96)"},
        "operator": {"color": "rgb(138, 0, 0)"},
        "parentheses": {"color": "rgb(102, 67, 42)"},
        "brackets": {"color": "rgb(72, 102, 41)"},
        "braces": {"color": "rgb(42, 95, 95)"},
    },
    "css": {
        "function": {"color": "rgb(138, 107, 18)"},
        "string": {"color": "rgb(127, 74, 31)"},
        "number": {"color": "rgb(153, 61, 0)"},
        "comment": {"color": "rgb(96, 96, 96)"},
        "parentheses": {"color": "rgb(138, 115, 81)"},
        "brackets": {"color": "rgb(120, 147, 61)"},
        "braces": {"color": "rgb(138, 48, 133)"},
        "selector": {"color": "rgb(138, 115, 81)"},
        "value": {"color": "rgb(153, 53, 36)"},
    },
}

PRESETS: dict[str, dict[str, dict[str, Any]]] = {
    "dark": DARK_THEME,
    "light": LIGHT_THEME,
}


def resolve_theme(theme: str | Theme | None) -> dict[str, dict[str, Any]]:
    """Resolve a preset name or partial theme to a complete theme.

    Partial themes are merged over the dark preset, one token style at a
    time. Unrecognized namespaces and keys are dropped with a warning.

    Args:
        theme: Preset name, theme mapping, or None for the dark preset

    Returns:
        A new, complete theme dictionary

    Raises:
        ThemeError: If ``theme`` is neither a string nor a mapping, or a
            namespace entry or token style is not a mapping
    """
    if theme is None:
        theme = "dark"
    if isinstance(theme, str):
        preset = PRESETS.get(theme)
        if preset is None:
            logger.warning(
                "Unknown theme preset %r; only 'light' or 'dark' are available, using 'light'",
                theme,
            )
            preset = LIGHT_THEME
        return {namespace: dict(styles) for namespace, styles in preset.items()}
    if not isinstance(theme, Mapping):
        raise ThemeError(f"Theme must be a preset name or a mapping, got {type(theme).__name__}")

    resolved = {namespace: dict(styles) for namespace, styles in DARK_THEME.items()}
    for namespace, styles in theme.items():
        if not isinstance(styles, Mapping):
            raise ThemeError(f"Theme namespace {namespace!r} must be a mapping")
        if namespace == "container":
            resolved["container"].update(styles)
            continue
        recognized = RECOGNIZED_OPTIONS.get(namespace)
        if recognized is None:
            logger.warning("Ignoring unrecognized theme namespace %r", namespace)
            continue
        for key, style in styles.items():
            if key not in recognized:
                logger.warning("Ignoring unrecognized %s theme option %r", namespace, key)
                continue
            if not isinstance(style, Mapping):
                raise ThemeError(f"Theme option {namespace}.{key} must be a mapping")
            resolved[namespace][key] = dict(style)
    return resolved


def _declarations(style: Mapping[str, Any]) -> str:
    return " ".join(f"{camel_to_kebab(prop)}: {value};" for prop, value in style.items())


def render_stylesheet(
    theme: str | Theme | None = None,
    *,
    prefix: str = "hlc",
    suffix: str = "",
    namespaces: Iterable[str] = ("html", "ts", "css"),
) -> str:
    """Render theme rules as CSS keyed by token class names.

    Args:
        theme: Preset name or theme mapping
        prefix: Class-name prefix used by the renderer
        suffix: Scope suffix used by the renderer
        namespaces: Theme tables to emit, in order

    Returns:
        CSS text, one rule per line
    """
    resolved = resolve_theme(theme)
    sb = StringBuilder()
    container = resolved.get("container")
    if container:
        sb.append(f".{prefix}_container{suffix} {{ {_declarations(container)} }}\n")
    for namespace in namespaces:
        kinds = THEME_KINDS.get(namespace)
        if kinds is None:
            logger.warning("Ignoring unrecognized theme namespace %r", namespace)
            continue
        for key, style in resolved.get(namespace, {}).items():
            kind = kinds.get(key)
            if kind is None or not style:
                continue
            sb.append(f".{prefix}_{kind.value}{suffix} {{ {_declarations(style)} }}\n")
    return sb.build()

"""Terminal formatting helpers for the ``strata`` CLI.

Core color functions live in ``codestrata.lib._util.ansi`` so that the
display layer under ``lib.vault`` can use them as well. This module
re-exports them and adds the higher-level helpers used by ``strata config``.
"""

from codestrata.lib._util.ansi import (  # noqa: F401  -- re-exports
    color,
    gray,
    green,
    red,
    supports_color,
    yellow,
)


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return color("yes" if value else "no", "32" if value else "31", enabled)


def violet(text: str, enabled: bool) -> str:
    """Return *text* in violet (ANSI 35) when *enabled*."""
    return color(text, "35", enabled)

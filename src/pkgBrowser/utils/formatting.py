"""Caption formatting helpers.

Captions are Qt rich text.  Decorations are purely cosmetic, so a template
that does not match its arguments is returned untouched instead of raising:
a glitched caption must never keep a list from rendering.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

NULL_PLACEHOLDER = "NULL"


def fmt_safe(template: str, *args: object) -> str:
    """Format *template* with positional *args*, tolerating mismatches.

    ``None`` arguments render as ``NULL`` rather than an empty string so that
    missing values stay visible.  When the template references an argument
    that was not supplied, or is itself malformed, the raw template is
    returned.
    """

    fixed_args = [NULL_PLACEHOLDER if arg is None else arg for arg in args]
    try:
        return template.format(*fixed_args)
    except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
        logger.debug("Leaving caption template %r unformatted: %s", template, exc)
        return template


def wrap_with_color(text: str, color_hex: str) -> str:
    """Return *text* wrapped in a rich-text span coloured with *color_hex*."""

    return f'<span style="color:{color_hex}">{text}</span>'

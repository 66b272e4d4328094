"""
Slug Sanitizer

Turns any user-supplied page identifier into a safe filename stem.
"""

import re

DEFAULT_SLUG = 'home'

_UNSAFE = re.compile(r'[^a-z0-9\-]')


def sanitize(raw):
    """Normalize `raw` into a slug made only of [a-z0-9-].

    Lowercases the input, drops every other character and falls back to
    'home' when nothing is left. Never raises.
    """
    if not isinstance(raw, str):
        raw = '' if raw is None else str(raw)
    safe = _UNSAFE.sub('', raw.lower())
    return safe or DEFAULT_SLUG

#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Interface language selection.

The active locale comes from, in order: a ``lang`` request parameter naming a
configured locale, the locale cookie, then ``settings.default_locale``.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Optional


LOCALE_PARAM = "lang"


@dataclass(frozen=True)
class LocaleOption:
    id: str
    display_name: str
    is_selected: bool = False


# -----------------------------------------------------------------------------

def resolve_locale(
    available: Mapping[str, str],
    default: str,
    requested: Optional[str] = None,
    cookie: Optional[str] = None,
) -> str:
    for candidate in (requested, cookie):
        if candidate and candidate in available:
            return candidate
    return default


def build_locale_options(available: Mapping[str, str], current: str) -> list[LocaleOption]:
    """One option per configured locale, in the table's order."""
    return [
        LocaleOption(id=locale_id, display_name=name, is_selected=(locale_id == current))
        for locale_id, name in available.items()
    ]

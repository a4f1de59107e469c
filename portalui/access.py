#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""Role flags shared by the page chrome and the admin tool section."""
# -----------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class AccessFlags:
    is_super_admin: bool = False
    is_owner: bool = False

    @property
    def can_administer_nodes(self) -> bool:
        return self.is_super_admin or self.is_owner


def compute_access_flags(user: Optional[Any]) -> AccessFlags:
    """Anonymous users get no flags.  Only an explicit True counts."""
    if user is None:
        return AccessFlags()
    return AccessFlags(
        is_super_admin=user.is_super_admin() is True,
        is_owner=user.is_owner() is True,
    )

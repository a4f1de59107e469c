"""Tests for role flags."""

from __future__ import annotations

from authserver.services.users import CurrentUser
from portalui.access import AccessFlags, compute_access_flags


class TestComputeAccessFlags:
    def test_anonymous(self) -> None:
        assert compute_access_flags(None) == AccessFlags(False, False)

    def test_super_admin(self) -> None:
        flags = compute_access_flags(CurrentUser(id="1", username="root", super_admin=True))
        assert flags.is_super_admin
        assert not flags.is_owner
        assert flags.can_administer_nodes

    def test_owner(self) -> None:
        flags = compute_access_flags(CurrentUser(id="2", username="o", owned_nodes=1))
        assert flags == AccessFlags(is_super_admin=False, is_owner=True)
        assert flags.can_administer_nodes

    def test_plain_user(self) -> None:
        flags = compute_access_flags(CurrentUser(id="3", username="p"))
        assert not flags.can_administer_nodes

    def test_truthy_non_bool_does_not_count(self) -> None:
        class Sloppy:
            def is_super_admin(self):
                return "yes"

            def is_owner(self):
                return 1

        assert compute_access_flags(Sloppy()) == AccessFlags(False, False)

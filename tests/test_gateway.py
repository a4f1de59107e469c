"""Tests for gateway context resolution and query fragments."""

from __future__ import annotations

from portalui.gateway import GatewayContext, gateway_for_anonymous, gateway_for_logged_in

FULL = {"gw_id": "gw1", "gw_address": "10.0.0.1", "gw_port": "2060"}


class TestGatewayContext:
    def test_complete(self) -> None:
        gateway = GatewayContext.from_mapping(FULL)
        assert gateway.is_complete
        assert gateway.as_dict() == FULL

    def test_partial_is_absent(self) -> None:
        gateway = GatewayContext.from_mapping({"gw_id": "gw1", "gw_port": "2060"})
        assert not gateway.is_complete
        assert gateway.as_dict() == {}
        assert gateway.login_parameters() == ""
        assert gateway.logout_parameters() == ""
        assert gateway.query_string() == ""

    def test_blank_values_are_absent(self) -> None:
        gateway = GatewayContext.from_mapping({**FULL, "gw_address": "  "})
        assert not gateway.is_complete

    def test_fragments(self) -> None:
        gateway = GatewayContext.from_mapping(FULL)
        assert gateway.logout_parameters() == "&amp;gw_id=gw1&amp;gw_address=10.0.0.1&amp;gw_port=2060"
        assert gateway.login_parameters() == "?gw_id=gw1&amp;gw_address=10.0.0.1&amp;gw_port=2060"
        assert gateway.query_string() == "?gw_id=gw1&gw_address=10.0.0.1&gw_port=2060"

    def test_values_are_percent_encoded(self) -> None:
        gateway = GatewayContext.from_mapping({**FULL, "gw_id": '"><script>'})
        fragment = gateway.login_parameters()
        assert "<" not in fragment
        assert '"' not in fragment
        assert "gw_id=%22%3E%3Cscript%3E" in fragment

    def test_resolve_per_field(self) -> None:
        gateway = GatewayContext.resolve({"gw_id": "new"}, FULL)
        assert gateway.as_dict() == {**FULL, "gw_id": "new"}


class TestResolutionPolicy:
    def test_logged_in_uses_session_only(self) -> None:
        assert not gateway_for_logged_in({}).is_complete
        assert gateway_for_logged_in(FULL).as_dict() == FULL

    def test_anonymous_prefers_request(self) -> None:
        session = {"gw_id": "s", "gw_address": "1.1.1.1", "gw_port": "1"}
        assert gateway_for_anonymous(FULL, session).as_dict() == FULL

    def test_anonymous_falls_back_to_session(self) -> None:
        assert gateway_for_anonymous({}, FULL).as_dict() == FULL

    def test_anonymous_nothing_anywhere(self) -> None:
        assert not gateway_for_anonymous({}, {}).is_complete

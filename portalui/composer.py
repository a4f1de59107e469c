#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Page composer
=============
Builds every portal page: main content, the tool pane, page metadata and
super-admin debug output, then hands the variables to the template renderer.

Usage::

    composer = PageComposer(ctx)
    composer.set_title("Hotspot status")
    composer.set_main_content(html)
    await composer.set_tool_section("ADMIN")     # optional
    return composer.display()

Tool pane sections
------------------
  ADMIN  — node / network pickers, gated on super admin and node ownership
  START  — login or logout links carrying the gateway context, language
           chooser, network information (the default pane)
  LOGIN  — placeholder section, no computed state

Unknown section names render a short diagnostic instead of raising, so a
bad name in a page handler never breaks the page.
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import logging
import re
from gettext import gettext as _
from pprint import pformat
from typing import Any, Optional

from fastapi.responses import HTMLResponse
from markupsafe import Markup

from authserver.core.config import Settings
from authserver.services.nodes import OwnershipFilter
from portalui.access import compute_access_flags
from portalui.context import PortalContext
from portalui.gateway import GatewayContext, gateway_for_anonymous, gateway_for_logged_in
from portalui.languages import LOCALE_PARAM, build_locale_options
from portalui.templating import TemplateRenderer, get_renderer


# -----------------------------------------------------------------------------

logger = logging.getLogger(__name__)

SECTION_ADMIN = "ADMIN"
SECTION_START = "START"
SECTION_LOGIN = "LOGIN"

DEBUG_PARAM = "debug_request"
OBJECT_ID_PARAM = "object_id"

DISPLAY_TEMPLATE = "classes/main_ui_display.html"
TOOL_SECTION_TEMPLATE = "classes/main_ui_tool_section.html"
TOOL_CONTENT_TEMPLATE = "classes/main_ui_tool_content.html"
ERROR_TEMPLATE = "sites/error.html"

# gw_id is used as a directory name when looking for a node stylesheet
_SAFE_NODE_DIR_RE = re.compile(r"^[A-Za-z0-9_-][A-Za-z0-9_.-]*$")


def unknown_section(section: str) -> str:
    return f"{_('Unknown section:')} {section}"


def page_defaults() -> dict[str, Any]:
    """Every variable the page template reads, at its safe default."""
    return {
        "html_headers": "",
        "title": "",
        "stylesheet_url": "",
        "stylesheet_parsed_file": "",
        "is_super_admin": False,
        "is_owner": False,
        "debug_requested": False,
        "debug_output": "",
        "tool_pane_enabled": False,
        "tool_pane_content": "",
        "main_content": "",
        "footer_scripts": [],
    }


def resolve_stylesheet(settings: Settings, gw_id: Optional[str]) -> str:
    """
    Template path of the stylesheet to inline: the node's own copy when it
    exists, otherwise the default one.
    """
    name = settings.stylesheet_name
    if gw_id and _SAFE_NODE_DIR_RE.match(gw_id):
        candidate = f"node/{gw_id}/{name}"
        if (settings.content_dir / candidate).is_file():
            return candidate
    return f"default/{name}"


# -----------------------------------------------------------------------------

class PageComposer:

    def __init__(self, ctx: PortalContext, renderer: Optional[TemplateRenderer] = None) -> None:
        self.ctx = ctx
        self.renderer = renderer or get_renderer()

        self._title = f"{ctx.network.name} {_('authentication server')}"
        self._html_headers = ""
        self._main_content = ""
        self._tool_content = ""
        self._tool_section_enabled = True
        self._footer_scripts: list[str] = []

    @property
    def settings(self) -> Settings:
        return self.ctx.settings

    # ─────────────────────────────────────────────────────────── page state

    @property
    def title(self) -> str:
        return self._title

    def set_title(self, title: str) -> None:
        self._title = title

    def set_html_header(self, headers: str) -> None:
        self._html_headers = headers

    def set_main_content(self, html: str) -> None:
        self._main_content = html

    def add_footer_script(self, script: str) -> None:
        """
        Append a ``<script>...</script>`` block to the end of ``<body>``.

        Meant for scripts that must run once the page is loaded, not for
        visible footer content.
        """
        self._footer_scripts.append(script)

    def is_tool_section_enabled(self) -> bool:
        return self._tool_section_enabled

    def set_tool_section_enabled(self, enabled: bool) -> None:
        self._tool_section_enabled = enabled

    def set_tool_content(self, html: str) -> None:
        self._tool_content = html

    @property
    def tool_content(self) -> str:
        return self._tool_content

    # ─────────────────────────────────────────────────────────── tool pane

    async def set_tool_section(self, section: str) -> str:
        """Build the named tool section and make it the tool content."""
        if section == SECTION_ADMIN:
            html = await self._admin_section()
        else:
            logger.warning("Unknown tool section requested: %r", section)
            html = unknown_section(section)
        self._tool_content = html
        return html

    async def _admin_section(self) -> str:
        user = self.ctx.user
        if user is None or user.is_nobody():
            logger.debug("Admin tool section denied (user=%s)", getattr(user, "username", None))
            return _("You do not have permissions to access any administration functions.")

        flags = compute_access_flags(user)
        variables = {
            "section_admin": True,
            "is_super_admin": flags.is_super_admin,
            "is_owner": flags.is_owner,
            "form_action": "",
            "node_ui": "",
            "network_ui": "",
        }

        # Node administration: super admins see every node, owners their own
        if flags.can_administer_nodes and self.ctx.node_selector is not None:
            variables["form_action"] = self.settings.generic_object_admin_href
            if flags.is_super_admin:
                ownership = OwnershipFilter.unrestricted()
            else:
                ownership = OwnershipFilter.owned_by(user.id)
            variables["node_ui"] = await self.ctx.node_selector.render(OBJECT_ID_PARAM, ownership)

        # Network administration is super-admin only
        if flags.is_super_admin and self.ctx.network_selector is not None:
            variables["network_ui"] = await self.ctx.network_selector.render(OBJECT_ID_PARAM)

        return self.renderer.fetch(TOOL_SECTION_TEMPLATE, variables)

    def get_tool_content(self, section: str = SECTION_START) -> str:
        """HTML of the tool pane for START or LOGIN."""
        if section == SECTION_START:
            return self.renderer.fetch(TOOL_CONTENT_TEMPLATE, self._start_variables())
        if section == SECTION_LOGIN:
            return self.renderer.fetch(TOOL_CONTENT_TEMPLATE, {
                "section_start": False,
                "section_login": True,
            })
        logger.warning("Unknown tool content requested: %r", section)
        return unknown_section(section)

    def _start_variables(self) -> dict[str, Any]:
        ctx = self.ctx
        network = ctx.network
        gateway = self._current_gateway()
        variables: dict[str, Any] = {
            "section_start": True,
            "section_login": False,
            "network_homepage_url": network.homepage_url,
            "network_name": network.name,
            "is_valid_user": False,
            "username": "",
            "logout_parameters": "",
            "login_parameters": "",
            "login_url": self.settings.login_url,
            "logout_url": "/logout",
            "form_action": ctx.request_uri.split("?", 1)[0],
            "locale_param": LOCALE_PARAM,
            "language_chooser": build_locale_options(
                self.settings.available_locales, ctx.current_locale,
            ),
            "tool_content": self._tool_content,
            "account_information": _("Accounts on %s are and will stay completely free.") % network.name,
            "tech_support_information": self._tech_support_information(),
        }

        if ctx.user is not None:
            variables["is_valid_user"] = True
            variables["username"] = ctx.user.username
            variables["logout_parameters"] = gateway.logout_parameters()
        else:
            variables["login_parameters"] = gateway.login_parameters()

        # The language form resubmits the gateway so a GET does not drop it
        variables["gateway_fields"] = gateway.as_dict()

        return variables

    def _tech_support_information(self) -> Markup:
        email = self.ctx.network.tech_support_email
        link = Markup('<a href="mailto:{0}">{0}</a>').format(email)
        return Markup(_("Please inform us of any problem or service interruption at: %s")) % link

    # ─────────────────────────────────────────────────────────── rendering

    def _current_gateway(self) -> GatewayContext:
        """Gateway of the client: the session once logged in, the request before."""
        if self.ctx.user is not None:
            return gateway_for_logged_in(self.ctx.session)
        return gateway_for_anonymous(self.ctx.params, self.ctx.session)

    def display(self, status_code: int = 200) -> HTMLResponse:
        """Render the whole page."""
        ctx = self.ctx
        variables = page_defaults()

        variables["html_headers"] = self._html_headers
        variables["title"] = self._title
        variables["stylesheet_url"] = self.settings.common_content_url + self.settings.stylesheet_name
        variables["stylesheet_parsed_file"] = resolve_stylesheet(self.settings, self._current_gateway().gw_id)
        logger.debug("Stylesheet for page: %s", variables["stylesheet_parsed_file"])

        # Page chrome (admin menu) needs the role flags regardless of the pane
        flags = compute_access_flags(ctx.user)
        variables["is_super_admin"] = flags.is_super_admin
        variables["is_owner"] = flags.is_owner

        if DEBUG_PARAM in ctx.params:
            if flags.is_super_admin:
                logger.info("Debug output shown to super admin %s", ctx.user.username)
                variables["debug_requested"] = True
                variables["debug_output"] = pformat(dict(ctx.params))
            else:
                logger.warning("Debug output requested without super admin rights")

        if self.is_tool_section_enabled():
            variables["tool_pane_enabled"] = True
            variables["tool_pane_content"] = self.get_tool_content()

        variables["main_content"] = self._main_content
        variables["footer_scripts"] = list(self._footer_scripts)

        return self.renderer.display(ctx.request, DISPLAY_TEMPLATE, variables, status_code=status_code)

    def display_error(
        self,
        message: str,
        show_tech_support_email: bool = True,
        status_code: int = 500,
    ) -> HTMLResponse:
        """Render *message* as the page's main content."""
        variables = {
            "error": message,
            "show_tech_support_email": False,
            "tech_support_email": "",
        }
        if show_tech_support_email:
            variables["show_tech_support_email"] = True
            variables["tech_support_email"] = self.ctx.network.tech_support_email

        self.set_main_content(self.renderer.fetch(ERROR_TEMPLATE, variables))
        return self.display(status_code=status_code)


# -----------------------------------------------------------------------------

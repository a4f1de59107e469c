#!/usr/bin/env python3
# -----------------------------------------------------------------------------
"""
Template renderer — thin wrapper over Starlette's Jinja2Templates.

``fetch`` returns a rendered fragment, ``display`` returns the full page as
an HTMLResponse.  Templates are looked up in the package ``templates``
directory first, then in the content directory (node / default
stylesheets).
"""
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from typing import Any, Optional

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from authserver.core.config import get_settings


TEMPLATES_DIR = os.path.join(os.path.dirname(__file__), "templates")


# -----------------------------------------------------------------------------

class TemplateRenderer:

    def __init__(self, directories: Optional[list[str]] = None) -> None:
        if directories is None:
            directories = [TEMPLATES_DIR, str(get_settings().content_dir)]
        self.templates = Jinja2Templates(directory=directories)

    def fetch(self, template_name: str, variables: dict[str, Any]) -> str:
        return self.templates.get_template(template_name).render(**variables)

    def display(
        self,
        request: Any,
        template_name: str,
        variables: dict[str, Any],
        status_code: int = 200,
    ) -> HTMLResponse:
        if request is None:
            return HTMLResponse(self.fetch(template_name, variables), status_code=status_code)
        return self.templates.TemplateResponse(
            request,
            template_name,
            variables,
            status_code=status_code,
        )


# -----------------------------------------------------------------------------

_renderer: Optional[TemplateRenderer] = None


def get_renderer() -> TemplateRenderer:
    global _renderer
    if _renderer is None:
        _renderer = TemplateRenderer()
    return _renderer


# -----------------------------------------------------------------------------

# =============================================================================
# app/templating.py - Jinja2 Template Rendering
# =============================================================================
# Shared Jinja2Templates instance for the server-rendered console page.
# Templates live in app/templates/ and are packaged with the app.
# =============================================================================

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def render_template(request: Request, template_name: str, context: dict[str, Any]) -> HTMLResponse:
    """Render template with context"""
    return templates.TemplateResponse(request, template_name, context)

"""Jinja2 template factory for the comparison pages."""

from __future__ import annotations

from pathlib import Path

from starlette.templating import Jinja2Templates

from klaverjas.logic.display import suit_symbol

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


def create_templates() -> Jinja2Templates:
    """Create the Jinja2 template engine with the suit_symbol filter registered."""
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["suit_symbol"] = suit_symbol
    return templates

from pathlib import Path
from typing import Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, ConfigDict, model_validator

from ..options import LANGUAGE_OPTIONS, SCOPE_OPTIONS, SORT_OPTIONS
from .pagination import ResultsView, humanize_count

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

FULL_PAGE_TEMPLATE = "home.html"
RESULTS_TEMPLATE = "partials/results.html"
ROWS_TEMPLATE = "partials/rows.html"


class RenderMode(BaseModel):
    """Full page, or an htmx fragment with or without the table header."""

    model_config = ConfigDict(frozen=True)

    is_fragment: bool = False
    include_header: bool = True

    @model_validator(mode="after")
    def _full_page_has_header(self) -> "RenderMode":
        if not self.is_fragment and not self.include_header:
            raise ValueError("a full page always includes the table header")
        return self

    @classmethod
    def full(cls) -> "RenderMode":
        return cls()

    @classmethod
    def fragment(cls, include_header: bool) -> "RenderMode":
        return cls(is_fragment=True, include_header=include_header)

    @classmethod
    def from_request(cls, hx_request: Optional[str], skip_table_header: Optional[str]) -> "RenderMode":
        if hx_request != "true":
            return cls.full()
        return cls.fragment(include_header=not skip_table_header)

    @property
    def template_name(self) -> str:
        if not self.is_fragment:
            return FULL_PAGE_TEMPLATE
        return RESULTS_TEMPLATE if self.include_header else ROWS_TEMPLATE


def create_templates(directory: Path = TEMPLATES_DIR) -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(directory))
    templates.env.filters["humanize_count"] = humanize_count
    templates.env.globals.update(
        language_options=LANGUAGE_OPTIONS,
        sort_options=SORT_OPTIONS,
        scope_options=SCOPE_OPTIONS,
    )
    return templates


def render_search(
    templates: Jinja2Templates,
    request: Request,
    view: ResultsView,
    mode: RenderMode,
    status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        mode.template_name,
        {"view": view, "mode": mode},
        status_code=status_code,
    )

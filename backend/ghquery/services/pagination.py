from typing import List, Optional

import httpx
from pydantic import BaseModel

from ..options import DEFAULT_SORT
from ..schemas import Repository, SearchResult
from .query_builder import SearchQuery

# (divisor, suffix), smallest first
_UNITS = ((1_000, "K"), (1_000_000, "M"), (1_000_000_000, "B"))


def humanize_count(count: int) -> str:
    """Abbreviate large counts to 3 significant figures: 1500 -> 1.5K."""
    if count < 1_000:
        return str(count)
    for divisor, suffix in _UNITS:
        scaled = f"{count / divisor:.3g}"
        # 999_999 rounds up to 1e+03K, the next unit renders it as 1M
        if float(scaled) < 1_000:
            return scaled + suffix
    divisor, suffix = _UNITS[-1]
    return f"{count // divisor}{suffix}"


class ResultsView(BaseModel):
    """Everything the HTML templates need for one request."""

    query: str = ""
    selected_lang: str = ""
    selected_sort: str = DEFAULT_SORT
    selected_scope: str = ""
    error: str = ""
    repositories: List[Repository] = []
    total_count: int = 0
    incomplete_results: bool = False
    page: int = 1
    next_page: Optional[int] = None
    # query string for the web route, used as the infinite-scroll target
    next_page_query: str = ""
    last_repository: Optional[Repository] = None


def web_query_string(query: SearchQuery, skip_table_header: bool = False) -> str:
    params = [
        ("q", query.name),
        ("lang", query.language or ""),
        ("sort", query.sort or ""),
        ("scope", query.scope or ""),
        ("page", str(query.page)),
    ]
    if skip_table_header:
        params.append(("skip_table_header", "1"))
    return str(httpx.QueryParams([(key, value) for key, value in params if value]))


def build_results_view(query: SearchQuery, result: SearchResult) -> ResultsView:
    view = ResultsView(
        query=query.name,
        selected_lang=query.language or "",
        selected_sort=query.sort or "",
        selected_scope=query.scope or "",
        repositories=result.items,
        total_count=result.total_count,
        incomplete_results=result.incomplete_results,
        page=query.page,
    )
    if query.page * query.per_page < result.total_count:
        view.next_page = query.page + 1
        view.next_page_query = web_query_string(query.with_page(view.next_page), skip_table_header=True)
        if result.items:
            view.last_repository = result.items[-1]
    return view

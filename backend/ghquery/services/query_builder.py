"""Build GitHub repository search queries.

See https://docs.github.com/en/search-github/searching-on-github/searching-for-repositories
for the qualifier syntax.
"""
from typing import List, Mapping, Optional

import httpx
from pydantic import BaseModel, ConfigDict

from ..errors import (
    InvalidInput,
    UnknownLanguage,
    UnknownOrder,
    UnknownScope,
    UnknownSort,
)
from ..options import (
    DEFAULT_ORDER,
    DEFAULT_SORT,
    LANGUAGE_OPTIONS,
    ORDER_OPTIONS,
    SCOPE_OPTIONS,
    SORT_OPTIONS,
)


class SearchQuery(BaseModel):
    """A validated search. Only allow-listed values ever reach this model."""

    model_config = ConfigDict(frozen=True)

    name: str
    scope: Optional[str] = None
    language: Optional[str] = None
    sort: Optional[str] = DEFAULT_SORT
    order: str = DEFAULT_ORDER
    page: int = 1
    per_page: int = 10

    @property
    def qualifiers(self) -> List[str]:
        out: List[str] = []
        if self.scope:
            out.append(f"in:{self.scope}")
        if self.language:
            out.append(f"language:{self.language}")
        return out

    @property
    def term(self) -> str:
        return " ".join([self.name, *self.qualifiers])

    def encode(self) -> str:
        params = {
            "q": self.term,
            "order": self.order,
            "per_page": str(self.per_page),
            "page": str(self.page),
        }
        if self.sort:
            params["sort"] = self.sort
        return str(httpx.QueryParams(sorted(params.items())))

    def with_page(self, page: int) -> "SearchQuery":
        return self.model_copy(update={"page": page})


def _allowed(value: Optional[str], options: Mapping[str, str], error) -> Optional[str]:
    if value is None or value == "":
        return None
    key = value.strip().lower()
    if key not in options:
        raise error(value)
    return key


def _positive(value: int, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidInput(f"{label} must be a positive integer, got {value!r}")
    return value


def build_search_query(
    name: Optional[str],
    scope: Optional[str] = None,
    language: Optional[str] = None,
    sort: Optional[str] = DEFAULT_SORT,
    order: str = DEFAULT_ORDER,
    page: int = 1,
    count: int = 10,
) -> SearchQuery:
    name = (name or "").strip()
    if not name:
        raise InvalidInput("cannot make search for empty repository name")

    scope = _allowed(scope, SCOPE_OPTIONS, UnknownScope)
    language = _allowed(language, LANGUAGE_OPTIONS, UnknownLanguage)
    sort = _allowed(sort, SORT_OPTIONS, UnknownSort)

    normalized_order = (order or "").strip().lower()
    if normalized_order not in ORDER_OPTIONS:
        raise UnknownOrder(order)

    return SearchQuery(
        name=name,
        scope=scope,
        language=language,
        sort=sort,
        order=normalized_order,
        page=_positive(page, "page"),
        per_page=_positive(count, "count"),
    )


def parse_page(raw: Optional[str]) -> int:
    """Page number from a URL parameter; anything unusable means page 1."""
    try:
        page = int(raw or "")
    except ValueError:
        return 1
    return page if page > 0 else 1

from typing import Protocol

from ..schemas import SearchResult


class SearchBackend(Protocol):
    async def fetch(self, encoded_query: str) -> SearchResult:
        ...

    async def aclose(self) -> None:
        ...

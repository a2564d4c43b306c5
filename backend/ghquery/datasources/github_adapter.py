from typing import Optional

import httpx
from loguru import logger

from ..config import Settings, get_settings
from ..errors import TransportError, UpstreamError
from ..schemas import SearchResult
from ..services.decoder import decode_search_result
from .base import SearchBackend


class GitHubAdapter(SearchBackend):
    """Single-attempt client for the repository search endpoint."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        log=None,
    ):
        self.settings = settings or get_settings()
        self.log = log or logger.bind(component="github")
        self.headers = {
            "Accept": self.settings.github_accept,
            "User-Agent": self.settings.github_user_agent,
        }
        if client is None:
            client_kwargs = {
                "base_url": str(self.settings.github_base_url),
                "timeout": self.settings.github_timeout_seconds,
            }
            if self.settings.github_proxy:
                client_kwargs["proxy"] = self.settings.github_proxy
            client = httpx.AsyncClient(**client_kwargs)
        self.client = client

    async def fetch(self, encoded_query: str) -> SearchResult:
        url = f"{self.settings.github_search_path}?{encoded_query}"
        try:
            resp = await self.client.get(url, headers=self.headers)
        except httpx.RequestError as exc:
            raise TransportError(exc) from exc

        if resp.status_code != httpx.codes.OK:
            self.log.debug(f"GitHub answered {resp.status_code} for '{encoded_query}'")
            raise UpstreamError(resp.status_code, encoded_query)

        return decode_search_result(resp.content)

    async def aclose(self) -> None:
        await self.client.aclose()

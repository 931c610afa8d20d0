"""
Async client for the Crowdin API v2.

Only the translation status endpoints needed by the action are implemented.
List endpoints are paginated with limit/offset; the client can walk every page
and hand back one combined list.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeAlias, cast

import httpx
from pydantic import ValidationError

from ..utils.core.exceptions import FetchError
from .models import LanguageProgress

if TYPE_CHECKING:
    from types import TracebackType


APIParams: TypeAlias = dict[str, str | int]
APIItem: TypeAlias = dict[str, object]

# Largest page size accepted by the Crowdin API.
MAX_PAGE_LIMIT = 500

logger = logging.getLogger(__name__)


class CrowdinClient:
    """Async Crowdin API client with transparent pagination."""

    def __init__(
        self,
        base_url: str,
        token: str,
        timeout: float = 30.0,
        page_limit: int = MAX_PAGE_LIMIT,
    ) -> None:
        """Initialize CrowdinClient with connection parameters."""
        self.base_url: str = base_url.rstrip("/")
        self.token: str = token
        self.timeout: float = timeout
        self.page_limit: int = page_limit
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> CrowdinClient:
        """Enter async context and initialize HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"Authorization": f"Bearer {self.token}"},
            timeout=self.timeout,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Exit async context and cleanup HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _get_page(self, path: str, params: APIParams) -> list[APIItem]:
        """Request one page of a list endpoint and return its `data` items."""
        if self._client is None:
            raise RuntimeError(
                "CrowdinClient not initialized. Use as async context manager."
            )

        url = f"{self.base_url}/{path.lstrip('/')}"
        try:
            response = await self._client.get(url, params=params)
            _ = response.raise_for_status()
            response_json = response.json()  # pyright: ignore[reportAny] # external API response
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Crowdin API returned HTTP {e.response.status_code} for {url}",
                context={"url": url, "status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(
                f"Crowdin API request failed: {e}", context={"url": url}
            ) from e
        except ValueError as e:
            raise FetchError(
                f"Invalid JSON returned by {url}", context={"url": url}
            ) from e

        if not isinstance(response_json, dict):
            raise FetchError("Invalid API response format: expected dict")

        page_raw = cast(dict[str, object], response_json).get("data")
        if not isinstance(page_raw, list):
            raise FetchError("Invalid API response format: missing data list")

        items: list[APIItem] = []
        for item_raw in cast(list[object], page_raw):
            if not isinstance(item_raw, dict):
                raise FetchError("Invalid API response format: expected item object")
            items.append(cast(APIItem, item_raw))
        return items

    async def _get_list(
        self, path: str, fetch_all: bool = True, params: APIParams | None = None
    ) -> list[APIItem]:
        """
        Fetch a list endpoint.

        Args:
            path: Endpoint path relative to the base URL
            fetch_all: Keep requesting pages until a short page is returned
            params: Extra query parameters

        Returns:
            Items from every requested page, in API order
        """
        all_items: list[APIItem] = []
        offset = 0

        while True:
            page_params: APIParams = {
                **(params or {}),
                "limit": self.page_limit,
                "offset": offset,
            }
            page = await self._get_page(path, page_params)
            all_items.extend(page)
            logger.debug(
                "Fetched %d item(s) from %s at offset %d", len(page), path, offset
            )

            if not fetch_all or len(page) < self.page_limit:
                break

            offset += self.page_limit

        return all_items

    async def get_project_progress(
        self, project_id: int, fetch_all: bool = True
    ) -> list[LanguageProgress]:
        """
        Fetch translation progress for every language of a project.

        Args:
            project_id: Numeric Crowdin project identifier
            fetch_all: Walk all pages (default) or only the first one

        Returns:
            One LanguageProgress per target language, in API order

        Raises:
            FetchError: On transport, HTTP or payload errors
        """
        items = await self._get_list(
            f"projects/{project_id}/languages/progress", fetch_all=fetch_all
        )

        languages: list[LanguageProgress] = []
        for item in items:
            try:
                languages.append(LanguageProgress.model_validate(item.get("data")))
            except ValidationError as e:
                raise FetchError(
                    f"Invalid language progress entry: {e}", context=item
                ) from e
        return languages

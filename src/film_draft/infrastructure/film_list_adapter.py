"""
Film List Adapter

Fetches list entries from the Letterboxd list backend over HTTP.
"""

import logging
from typing import Any, Dict, List, Optional

import aiohttp

from ..application.interfaces import IFilmListProvider
from ..domain.entities.film_list import ListEntry
from ..domain.entities.list_url import ListUrl
from ..domain.exceptions import FilmListFetchError

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "https://letterboxd-list-scraper-lcoj.onrender.com"
REQUEST_TIMEOUT = 60  # seconds, the backend scrapes on demand


def entry_from_payload(item: Dict[str, Any]) -> ListEntry:
    """Build a ListEntry from one element of the backend's JSON array

    Raises:
        FilmListFetchError: If a required field is missing
    """
    try:
        return ListEntry(
            position=int(item["position"]),
            title=str(item["title"]),
            year=str(item.get("year") or ""),
            url_slug=item.get("urlSlug") or "",
            poster_url=item.get("posterUrl") or "",
            suggested_by=item.get("note") or None,
            disabled=bool(item.get("disabled", False))
        )
    except (KeyError, TypeError, ValueError) as e:
        raise FilmListFetchError(f"Unexpected list entry: {item!r}") from e


class LetterboxdListAdapter(IFilmListProvider):
    """GET ``<backend>/list?url=<detail url>`` returning a JSON array of films"""

    def __init__(self, backend_url: Optional[str] = None) -> None:
        self.backend_url = (backend_url or DEFAULT_BACKEND_URL).rstrip("/")
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current aiohttp session."""
        return self._session

    async def initialize(self) -> None:
        """Open the HTTP session if it is not open already"""
        if self._session and not self._session.closed:
            return
        self._session = aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT))
        logger.debug(f"{self.__class__.__name__} session initialized")

    async def close(self) -> None:
        if self._session:
            try:
                if not self._session.closed:
                    await self._session.close()
            except Exception as e:
                logger.error(f"Error closing {self.__class__.__name__} session: {e}")
            finally:
                self._session = None

    async def fetch_entries(self, list_url: ListUrl) -> List[ListEntry]:
        await self.initialize()
        url = f"{self.backend_url}/list"
        try:
            async with self._session.get(url, params={"url": list_url.detail_url}) as response:
                if response.status != 200:
                    message = await self._error_message(response)
                    raise FilmListFetchError(message or f"List request failed: {response.status}")
                data = await response.json()
        except aiohttp.ClientError as e:
            logger.error(f"List request failed: {e}")
            raise FilmListFetchError("Unexpected error, list could not be retrieved") from e

        if not isinstance(data, list):
            raise FilmListFetchError("List backend returned an unexpected payload")
        entries = [entry_from_payload(item) for item in data]
        logger.info(f"Fetched {len(entries)} films from {list_url.grid_url}")
        return entries

    async def _error_message(self, response: aiohttp.ClientResponse) -> Optional[str]:
        try:
            payload = await response.json()
        except (aiohttp.ContentTypeError, ValueError):
            return None
        if isinstance(payload, dict):
            return payload.get("message")
        return None

    async def __aenter__(self) -> "LetterboxdListAdapter":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

"""Concurrent download of the three upstream JSON collections."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from meetup_data.config import Settings
from meetup_data.errors import FetchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteSources:
    meetups_url: str
    speakers_url: str
    sponsors_url: str

    @classmethod
    def from_settings(cls, settings: Settings) -> RemoteSources:
        return cls(
            meetups_url=settings.meetups_url,
            speakers_url=settings.speakers_url,
            sponsors_url=settings.sponsors_url,
        )


@dataclass
class RemoteCollections:
    """Raw, un-validated collections as returned by the upstream API."""

    meetups: list[dict[str, Any]]
    speakers: list[dict[str, Any]]
    sponsors: list[dict[str, Any]]


async def fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    """GET ``url`` and decode its JSON body.

    Raises:
        FetchError: On a non-success status, a transport failure or an
            undecodable body.
    """
    logger.info("Fetching: %s", url)
    try:
        response = await client.get(url)
    except httpx.HTTPError as exc:
        raise FetchError(url, reason=str(exc) or type(exc).__name__) from exc

    if not response.is_success:
        raise FetchError(url, status_code=response.status_code, reason=response.reason_phrase)

    try:
        return response.json()
    except ValueError as exc:
        # Covers both malformed JSON and bodies that are not valid UTF-8.
        raise FetchError(url, status_code=response.status_code, reason=f"invalid JSON: {exc}") from exc


async def fetch_collection(client: httpx.AsyncClient, url: str) -> list[Any]:
    """Fetch ``url`` and require its body to be a JSON array."""
    data = await fetch_json(client, url)
    if not isinstance(data, list):
        raise FetchError(url, reason="expected a JSON array")
    return data


async def fetch_collections(
    sources: RemoteSources,
    timeout: float = 15.0,
    deadline: float = 60.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> RemoteCollections:
    """Fetch meetups, speakers and sponsors concurrently.

    The first failure aborts the whole fetch and the other in-flight
    requests are cancelled.  ``deadline`` bounds the three requests as a
    whole; ``timeout`` applies to each request.
    """
    urls = (sources.meetups_url, sources.speakers_url, sources.sponsors_url)

    async with httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True) as client:
        tasks = [asyncio.create_task(fetch_collection(client, url)) for url in urls]
        try:
            async with asyncio.timeout(deadline):
                meetups, speakers, sponsors = await asyncio.gather(*tasks)
        except TimeoutError as exc:
            raise FetchError(", ".join(urls), reason=f"deadline of {deadline}s exceeded") from exc
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            # Collect every outcome so no task exception goes unretrieved.
            await asyncio.gather(*tasks, return_exceptions=True)

    logger.info("Fetched %d meetups", len(meetups))
    logger.info("Fetched %d speakers", len(speakers))
    logger.info("Fetched %d sponsors", len(sponsors))
    return RemoteCollections(meetups=meetups, speakers=speakers, sponsors=sponsors)


def fetch_all(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> RemoteCollections:
    """Synchronous entry point around :func:`fetch_collections`."""
    return asyncio.run(
        fetch_collections(
            RemoteSources.from_settings(settings),
            timeout=settings.fetch_timeout_seconds,
            deadline=settings.fetch_deadline_seconds,
            transport=transport,
        )
    )

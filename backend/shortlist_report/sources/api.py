"""
REST data source - vacancies, candidates and users from the dashboard API

Responsibilities:
1. Fetch the three collections concurrently
2. Attach the bearer token when configured
3. Turn transport/HTTP/JSON failures into DataLoadError

Depends on:
- httpx: async HTTP client

Test points:
- test_load_from_api: collections fetched and selected
- test_api_failure_is_data_load_error
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from ..config import get_config
from ..interfaces import DataLoadError, IReportDataSource
from ..models import ReportContext
from .selection import LOAD_FAILED_MESSAGE, ReportSelector

logger = logging.getLogger(__name__)


class ApiReportDataSource(IReportDataSource):
    """Loads report inputs from the REST API"""

    ENDPOINTS = {
        "vacancies": "/vacancies",
        "candidates": "/candidates",
        "users": "/users",
    }

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout_sec: float | None = None,
        selector: ReportSelector | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        config = get_config()
        self.base_url = (base_url or config.api.base_url).rstrip("/")
        self.token = token if token is not None else config.api.token
        self.timeout_sec = timeout_sec or config.api.timeout_sec
        self.selector = selector or ReportSelector()
        self.transport = transport

    def load(self, item_number: str) -> ReportContext:
        collections = asyncio.run(self.fetch_all())
        return self.selector.select(
            item_number,
            collections["vacancies"],
            collections["candidates"],
            collections["users"],
        )

    async def fetch_all(self) -> dict[str, list[dict[str, Any]]]:
        """Fetch every collection in parallel"""
        headers = {"Content-Type": "application/json"}
        token = str(self.token or "").strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        async with httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.timeout_sec,
            transport=self.transport,
        ) as client:
            results = await asyncio.gather(
                *(self._get_list(client, path) for path in self.ENDPOINTS.values())
            )
        return dict(zip(self.ENDPOINTS.keys(), results))

    async def _get_list(self, client: httpx.AsyncClient, path: str) -> list[dict[str, Any]]:
        try:
            response = await client.get(path)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"failed to load {path}: {e}")
            raise DataLoadError(LOAD_FAILED_MESSAGE) from e

        if not isinstance(data, list):
            logger.error(f"unexpected payload from {path}: {type(data).__name__}")
            raise DataLoadError(LOAD_FAILED_MESSAGE)
        return [row for row in data if isinstance(row, dict)]

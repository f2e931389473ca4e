"""
Real HTTP resource fetcher.

Looks up one resource with a single authenticated GET so links can be
resolved against the live or sandbox API. No retries and no pagination;
those belong to the transport layer of the full client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from gocardless_resources.contracts.interfaces import AsyncResourceFetcher
from gocardless_resources.errors import ResourceNotFound
from gocardless_resources.resources.collections import decode_envelope, record_type_for
from gocardless_resources.utils.config_loader import ClientConfig, load_client_config

logger = logging.getLogger(__name__)


class HttpResourceFetcher(AsyncResourceFetcher):
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.config = config or load_client_config()
        self.base_url = self.config.resolved_base_url
        self._transport = transport
        if not self.config.access_token:
            logger.warning("GoCardless access token is not set.")

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "GoCardless-Version": self.config.api_version,
        }
        if self.config.access_token:
            headers["Authorization"] = f"Bearer {self.config.access_token}"
        return headers

    async def fetch(self, resource_type: str, identity: str) -> Any:
        """
        GET {base_url}/{resource_type}/{identity}.

        Known families are decoded into records, others are returned as the
        unwrapped JSON object. 404 raises ResourceNotFound; other HTTP errors
        propagate as httpx.HTTPStatusError.
        """
        url = f"{self.base_url}/{quote(resource_type, safe='')}/{quote(identity, safe='')}"
        logger.info(f"Fetching {resource_type}/{identity}")
        async with httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.get(url, headers=self._headers())

        if response.status_code == 404:
            raise ResourceNotFound(resource_type, identity)
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error fetching {resource_type}/{identity}: {e.response.status_code} {e.response.text}")
            raise

        body = response.json()
        record_type = record_type_for(resource_type)
        if record_type is None:
            return body.get(resource_type, body) if isinstance(body, dict) else body
        return decode_envelope(body, record_type)

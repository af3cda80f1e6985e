"""Low-level REST API wrapper for Suno."""

from __future__ import annotations

import json
import logging
from typing import Any

from curl_cffi.const import CurlECode
from curl_cffi.requests import AsyncSession, RequestsError

from suno_api.auth import SunoAuth
from suno_api.const import (
    BASE_URL,
    BILLING_PATH,
    BILLING_TIMEOUT,
    FEED_PATH,
    FEED_TIMEOUT,
    GENERATE_PATH,
    GENERATE_TIMEOUT,
)
from suno_api.exceptions import RequestError, TransportTimeoutError
from suno_api.models import AudioInfo, Credits

logger = logging.getLogger(__name__)


class SunoAPI:
    """Low-level HTTP client for the Suno studio API.

    Uses curl_cffi to impersonate Chrome's TLS fingerprint,
    bypassing Cloudflare bot protection. The bearer token is read from
    ``SunoAuth`` right before every send, so a refresh between calls is
    always picked up.
    """

    def __init__(self, auth: SunoAuth, session: Any | None = None):
        self._auth = auth
        self._session = session if session is not None else AsyncSession(impersonate="chrome")

    async def close(self) -> None:
        await self._session.close()

    async def _request(self, method: str, path: str, timeout: float, **kwargs) -> Any:
        """Make an authenticated request and return the decoded JSON body."""
        url = path if path.startswith("http") else f"{BASE_URL}{path}"
        headers = {**self._auth.auth_headers(), **kwargs.pop("headers", {})}

        json_body = kwargs.pop("json", None)
        if json_body is not None:
            headers["Content-Type"] = "application/json"
            kwargs["data"] = json.dumps(json_body)

        try:
            resp = await self._session.request(
                method, url, headers=headers, timeout=timeout, **kwargs
            )
        except RequestsError as e:
            if getattr(e, "code", None) == CurlECode.OPERATION_TIMEDOUT:
                raise TransportTimeoutError(
                    f"{method} {path} timed out after {timeout}s"
                ) from e
            raise RequestError(None, str(e)) from e

        if not 200 <= resp.status_code < 300:
            logger.debug("%s %s → %s", method, path, resp.status_code)
            logger.debug("Response: %s", resp.text[:500])
            raise RequestError(resp.status_code, getattr(resp, "reason", "") or "")
        return resp.json() if resp.content else None

    async def generate_songs(self, payload: dict) -> list[dict]:
        """Submit a generation payload and return the raw provisional clips."""
        data = await self._request(
            "POST", GENERATE_PATH, timeout=GENERATE_TIMEOUT, json=payload,
        )
        logger.debug("generateSongs Response:\n%s", json.dumps(data, indent=2))
        if not isinstance(data, dict) or not isinstance(data.get("clips"), list):
            raise RequestError(None, "Generate response did not contain clips")
        return data["clips"]

    async def get_feed(self, song_ids: list[str] | None = None) -> list[AudioInfo]:
        """Fetch clips from the feed, optionally restricted to the given ids.

        The result keeps the order of the service response, which is not
        necessarily the order of ``song_ids``.
        """
        url = f"{BASE_URL}{FEED_PATH}"
        if song_ids is not None:
            url = f"{url}?ids={','.join(song_ids)}"
        logger.info("Get audio status: %s", url)

        data = await self._request("GET", url, timeout=FEED_TIMEOUT)
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            logger.debug("Feed response: %s", data)
            raise RequestError(None, "Feed response was not a list of clips")
        return [AudioInfo.from_clip(item) for item in data]

    async def get_billing(self) -> Credits:
        """Get the account's remaining credits and monthly usage."""
        data = await self._request("GET", BILLING_PATH, timeout=BILLING_TIMEOUT)
        if not isinstance(data, dict):
            logger.debug("Billing response: %s", data)
            raise RequestError(None, "Billing response was not an object")
        return Credits(
            credits_left=data.get("total_credits_left", 0),
            period=data.get("period"),
            monthly_limit=data.get("monthly_limit", 0),
            monthly_usage=data.get("monthly_usage", 0),
        )

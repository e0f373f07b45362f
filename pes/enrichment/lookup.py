"""HTTP client for the name lookup services (agify, genderize, nationalize)."""

import asyncio
import json
import logging
from typing import Any

import aiohttp

logger = logging.getLogger(__name__)


class LookupServiceError(RuntimeError):
    """A lookup produced no usable document."""

    def __init__(self, service: str, message: str):
        super().__init__(f"{service}: {message}")
        self.service = service


class LookupClient:
    """Queries one lookup service by name and returns whatever JSON it sends back."""

    def __init__(self, service: str, base_url: str, timeout: float = 10.0):
        self.service = service
        self.base_url = base_url
        self.timeout = timeout

    async def lookup(self, name: str) -> Any:
        """Fetch ``base_url?name=<name>`` and parse the body as JSON.

        Raises:
            LookupServiceError: on transport failure, timeout, non-2xx status or
                a body that is not JSON
        """
        logger.debug("Looking up %r via %s", name, self.service)
        try:
            async with aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as session:
                async with session.get(self.base_url, params={"name": name}) as resp:
                    if resp.status >= 300:
                        body = await resp.text()
                        raise LookupServiceError(
                            self.service,
                            f"HTTP {resp.status} {resp.reason}; body snippet: {body[:200]!r}",
                        )
                    raw = await resp.read()
        except asyncio.TimeoutError as e:
            raise LookupServiceError(
                self.service, f"timed out after {self.timeout}s"
            ) from e
        except aiohttp.ClientError as e:
            raise LookupServiceError(self.service, f"request failed: {e!r}") from e

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise LookupServiceError(self.service, f"invalid JSON body: {e}") from e

    def __repr__(self) -> str:
        return f"LookupClient(service={self.service!r}, base_url={self.base_url!r})"

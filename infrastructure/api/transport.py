"""Single outbound HTTP call with timeout and fixed-delay retries."""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence

import httpx

from config import settings
from core.logging.logger import get_logger
from domain.errors import TransportError, UpstreamError
from .retry_policy import RetryBudget, RetryPolicy

logger = get_logger(__name__, service="transport")


@dataclass(frozen=True, slots=True)
class TransportResponse:
    status: int
    body: Any
    url: str


class HttpTransport:
    """Owns the process-wide ``httpx.AsyncClient`` and applies the retry policies.

    Usage::

        async with HttpTransport() as transport:
            response = await transport.call("GET", url, headers=...)
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        policies: Sequence[RetryPolicy] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.timeout = settings.REQUEST_TIMEOUT if timeout is None else timeout
        self.policies = tuple(policies) if policies is not None else RetryPolicy.defaults()
        self._transport = transport
        self.session: Optional[httpx.AsyncClient] = None

    async def __aenter__(self) -> "HttpTransport":
        self.session = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self

    async def __aexit__(self, *_) -> None:
        if self.session:
            await self.session.aclose()
            self.session = None

    async def call(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> TransportResponse:
        """Perform one logical request, retrying per policy.

        Raises:
            UpstreamError: terminal non-2xx status.
            TransportError: no response after the transient policy gave up.
        """
        if self.session is None:
            raise RuntimeError("HttpTransport used outside 'async with'")

        budget = RetryBudget(self.policies)
        while True:
            try:
                response = await self.session.request(method, url, headers=headers)
            except httpx.TransportError as exc:
                step = budget.next_retry(None)
                if step is None:
                    logger.error(
                        lambda: f"transport failure {type(exc).__name__}",
                        extra={"url": url, "error": str(exc) or type(exc).__name__},
                    )
                    raise TransportError(f"{type(exc).__name__}: {exc}", url=url) from exc
                policy, attempt = step
                logger.warning(
                    lambda: f"{type(exc).__name__}, retrying in {policy.delay:g}s",
                    extra={"url": url, "attempt": attempt, "policy": policy.name},
                )
                await asyncio.sleep(policy.delay)
                continue
            except httpx.HTTPError as exc:
                # Decoding and protocol failures are not retried.
                logger.error(
                    lambda: f"unreadable response {type(exc).__name__}",
                    extra={"url": url, "error": str(exc) or type(exc).__name__},
                )
                raise TransportError(f"{type(exc).__name__}: {exc}", url=url) from exc

            status = response.status_code
            if 200 <= status < 300:
                return TransportResponse(status=status, body=self._decode(response), url=url)

            step = budget.next_retry(status)
            if step is None:
                message = self._error_message(response)
                logger.warning(
                    lambda: f"HTTP {status} {message}",
                    extra={"url": url, "status": status},
                )
                raise UpstreamError(status, message, url=url)
            policy, attempt = step
            logger.warning(
                lambda: f"HTTP {status}, retrying in {policy.delay:g}s",
                extra={"url": url, "status": status, "attempt": attempt, "policy": policy.name},
            )
            await asyncio.sleep(policy.delay)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError(response.status_code, "response body is not JSON", url=str(response.url)) from exc

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        # Riot error bodies look like {"status": {"message": ..., "status_code": ...}}
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and isinstance(data.get("status"), dict):
            message = data["status"].get("message")
            if message:
                return str(message)
        return response.reason_phrase

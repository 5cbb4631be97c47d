"""HTTP transport for the TradingView scanner API."""

import asyncio
from typing import Optional, Union

import httpx

from ..config.settings import ScannerSettings, settings
from ..shared.exceptions import ScannerTimeoutError, TransportError
from ..shared.logging_config import context_logger
from ..version import VERSION

OK_STATUS_CODES = (200, 201)


class ScannerClient:
    """
    Async HTTP client for scanner requests.

    Every request is bounded by ``timeout`` seconds, covering connect,
    send and reading the full body. Usage::

        async with ScannerClient() as client:
            body = await client.do("POST", payload)

    A preconfigured ``httpx.AsyncClient`` may be injected; its read
    timeout is used when it is set and positive. Injected clients are
    not closed by this class.
    """

    def __init__(
        self,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
        debug: Optional[bool] = None,
        config: Optional[ScannerSettings] = None,
    ):
        self._settings = config or settings
        self._client = http_client
        self._owns_client = http_client is None
        self.timeout = timeout if timeout and timeout > 0 else self._timeout_of(http_client)
        self.debug = self._settings.debug if debug is None else debug

    def _timeout_of(self, http_client: Optional[httpx.AsyncClient]) -> float:
        if http_client is not None:
            read_timeout = http_client.timeout.read
            if read_timeout is not None and read_timeout > 0:
                return read_timeout
        return self._settings.http_timeout_seconds

    async def __aenter__(self):
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def connect(self):
        """Initialize the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.timeout))
            self._owns_client = True
            context_logger.info(f"Scanner client ready for {self._settings.api_url} (timeout {self.timeout}s)")

    async def close(self):
        """Close the HTTP client if this instance created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    def _headers(self, method: str) -> dict[str, str]:
        headers = {
            "DNT": "1",
            "User-Agent": f"{self._settings.user_agent}/{VERSION}",
        }
        if method in ("POST", "PUT"):
            headers["Content-Type"] = "application/x-www-form-urlencoded;charset=utf-8"
        return headers

    async def do(
        self,
        method: str,
        payload: Union[str, bytes],
        auth_needed: bool = False,
        screener: str = "",
    ) -> bytes:
        """
        Send a request to the scan endpoint and return the response body.

        Args:
            method: HTTP method, usually "POST"
            payload: Serialized request body
            auth_needed: Whether the request needs an authenticated session
            screener: Screener path segment, e.g. "crypto" or "america"

        Returns:
            Raw response body

        Raises:
            ScannerTimeoutError: No complete response within the timeout
            TransportError: Network failure, status other than 200/201,
                or an authenticated request
        """
        if auth_needed:
            raise TransportError("Authenticated scanner requests are not supported")

        if self._client is None or self._client.is_closed:
            await self.connect()

        method = method.upper()
        url = self._settings.scan_url(screener)
        if self.debug:
            context_logger.debug(f"url: {url}")

        request = self._client.build_request(method, url, content=payload, headers=self._headers(method))
        if self.debug:
            self._dump_request(request)

        try:
            response = await asyncio.wait_for(self._client.send(request), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise ScannerTimeoutError("timeout on reading data from TradingView Scanner API") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Scanner request failed: {e}") from e

        if self.debug:
            self._dump_response(response)

        if response.status_code not in OK_STATUS_CODES:
            raise TransportError(
                f"{response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=response.content,
            )
        return response.content

    def _dump_request(self, request: httpx.Request) -> None:
        headers = "\n".join(f"{name}: {value}" for name, value in request.headers.items())
        body = request.content.decode("utf-8", errors="replace")
        context_logger.debug(f"dumpReq ok: {request.method} {request.url}\n{headers}\n\n{body}")

    def _dump_response(self, response: httpx.Response) -> None:
        headers = "\n".join(f"{name}: {value}" for name, value in response.headers.items())
        body = response.content.decode("utf-8", errors="replace")
        context_logger.debug(
            f"dumpResponse ok: {response.status_code} {response.reason_phrase}\n{headers}\n\n{body}"
        )

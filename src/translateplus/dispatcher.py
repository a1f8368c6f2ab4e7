# SPDX-License-Identifier: Apache-2.0
"""HTTP request dispatcher with concurrency limiting and retries."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from contextlib import ExitStack
from pathlib import Path
from typing import Any

import aiohttp

from translateplus._version import __version__
from translateplus.config import ClientConfig
from translateplus.errors import (
    APIError,
    AuthenticationError,
    InsufficientCreditsError,
    RateLimitError,
    ValidationError,
)

logger = logging.getLogger(__name__)

USER_AGENT = f"translateplus-python/{__version__}"

# Status codes with a dedicated error type; anything else non-2xx is APIError
STATUS_ERRORS: dict[int, type[APIError]] = {
    401: AuthenticationError,
    403: AuthenticationError,
    402: InsufficientCreditsError,
    429: RateLimitError,
}

# Transport-level failures eligible for retry
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError)


def _describe(error: BaseException | None) -> str:
    """Return a readable message for a transport error."""
    if error is None:
        return "Unknown error"
    # Timeouts usually carry no message
    return str(error) or type(error).__name__


class RequestDispatcher:
    """Sends requests to the TranslatePlus API.

    Every request carries the API key header and passes through a shared
    semaphore, so at most ``config.max_concurrent`` requests are in flight.
    Transport failures (connection errors, timeouts) are retried with
    exponential backoff of ``2 ** attempt`` seconds. HTTP error statuses are
    never retried; they are mapped to typed exceptions immediately.
    """

    def __init__(self, config: ClientConfig) -> None:
        """Initialize RequestDispatcher.

        Args:
            config: Client configuration.
        """
        self._config = config
        self._semaphore = asyncio.Semaphore(config.max_concurrent)
        self._session: aiohttp.ClientSession | None = None
        self._headers = {
            "X-API-KEY": config.api_key,
            "User-Agent": USER_AGENT,
        }
        self._timeout = aiohttp.ClientTimeout(
            connect=config.timeout,
            sock_connect=config.timeout,
            sock_read=config.timeout,
        )

    @property
    def config(self) -> ClientConfig:
        """Return the client configuration."""
        return self._config

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure aiohttp session exists.

        Returns:
            Active aiohttp session.
        """
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, str | Path] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and return the decoded JSON response.

        Args:
            method: HTTP method ("GET" or "POST").
            endpoint: Endpoint path, e.g. "/v2/translate".
            data: Request body. Sent as JSON, or as form fields when files are given.
            files: Files to upload as multipart parts, keyed by field name.
            params: URL query parameters.

        Returns:
            Decoded response body ({} for an empty body).

        Raises:
            ValidationError: If a file to upload does not exist.
            AuthenticationError: On 401 or 403.
            InsufficientCreditsError: On 402.
            RateLimitError: On 429.
            APIError: On any other error status, on retry exhaustion,
                or when cancelled while queued or between retries.

        Note:
            Cancellation while waiting for a slot or sleeping before a retry
            is reported as ``APIError("Request interrupted")``, not re-raised
            as ``asyncio.CancelledError``. Code relying on cancellation
            propagating (``asyncio.timeout()``, ``asyncio.wait_for``,
            ``TaskGroup``) sees this APIError instead.
        """
        url = self._config.url_for(endpoint)
        query = {key: str(value) for key, value in params.items()} if params else None
        upload = self._check_files(files) if files else None

        try:
            await self._semaphore.acquire()
        except asyncio.CancelledError:
            raise APIError("Request interrupted") from None

        try:
            return await self._send_with_retry(method, url, data, upload, query)
        finally:
            self._semaphore.release()

    @staticmethod
    def _check_files(files: Mapping[str, str | Path]) -> dict[str, Path]:
        """Resolve upload paths, failing on any that do not exist."""
        checked: dict[str, Path] = {}
        for field_name, file_path in files.items():
            path = Path(file_path)
            if not path.is_file():
                raise ValidationError(f"File not found: {file_path}")
            checked[field_name] = path
        return checked

    async def _send_with_retry(
        self,
        method: str,
        url: str,
        data: Mapping[str, Any] | None,
        upload: dict[str, Path] | None,
        query: dict[str, str] | None,
    ) -> dict[str, Any]:
        session = await self._ensure_session()
        max_retries = self._config.max_retries
        last_error: BaseException | None = None

        for attempt in range(max_retries + 1):
            try:
                with ExitStack() as stack:
                    body_kwargs = self._build_body(data, upload, stack)
                    logger.debug("%s %s (attempt %d/%d)", method, url, attempt + 1, max_retries + 1)
                    async with session.request(
                        method,
                        url,
                        params=query,
                        headers=self._headers,
                        timeout=self._timeout,
                        **body_kwargs,
                    ) as response:
                        status = response.status
                        body = await response.read()
            except TRANSPORT_ERRORS as e:
                last_error = e
                if attempt < max_retries:
                    delay = 2**attempt
                    logger.warning(
                        "Request to %s failed (%s), retrying in %ds (%d/%d)",
                        url,
                        _describe(e),
                        delay,
                        attempt + 1,
                        max_retries,
                    )
                    try:
                        await asyncio.sleep(delay)
                    except asyncio.CancelledError:
                        raise APIError("Request interrupted") from None
                continue

            return self._handle_response(status, body)

        raise APIError(
            f"Request failed after {max_retries} retries: {_describe(last_error)}"
        ) from last_error

    @staticmethod
    def _build_body(
        data: Mapping[str, Any] | None,
        upload: dict[str, Path] | None,
        stack: ExitStack,
    ) -> dict[str, Any]:
        """Build aiohttp body keyword arguments for one attempt.

        Multipart bodies are single-use in aiohttp, so they are rebuilt on
        every attempt. Opened files are registered on ``stack``.
        """
        if upload:
            form = aiohttp.FormData()
            for key, value in (data or {}).items():
                form.add_field(key, str(value))
            for field_name, path in upload.items():
                form.add_field(
                    field_name,
                    stack.enter_context(path.open("rb")),
                    filename=path.name,
                    content_type="application/octet-stream",
                )
            return {"data": form}
        if data is not None:
            return {"json": dict(data)}
        return {}

    @staticmethod
    def _handle_response(status: int, body: bytes) -> dict[str, Any]:
        """Decode a success body or raise the error matching the status.

        Success bodies are returned exactly as decoded. The API always sends a
        JSON object, but a top-level array or scalar is passed through rather
        than rejected. Error bodies that are not valid UTF-8 JSON are ignored
        and the generic status message is used.
        """
        if 200 <= status < 300:
            if not body:
                return {}
            result: Any = json.loads(body)
            return result

        error_data: dict[str, Any] = {}
        message = f"API request failed with status {status}"
        try:
            decoded = json.loads(body) if body else None
        except ValueError:
            # Also covers UnicodeDecodeError from non-UTF-8 bodies
            decoded = None
        if isinstance(decoded, dict):
            error_data = decoded
            if "detail" in decoded:
                message = str(decoded["detail"])

        logger.debug("API error %d: %s", status, message)
        error_cls = STATUS_ERRORS.get(status, APIError)
        raise error_cls(message, status_code=status, response=error_data)

# SPDX-License-Identifier: Apache-2.0
"""TranslatePlus API client."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from translateplus.config import (
    DEFAULT_BASE_URL,
    DEFAULT_MAX_CONCURRENT,
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from translateplus.dispatcher import RequestDispatcher
from translateplus.errors import ValidationError

MAX_BATCH_SIZE = 100
SUBTITLE_FORMATS = ("srt", "vtt")


class TranslatePlusClient:
    """Async client for the TranslatePlus translation API.

    Covers text, batch, HTML, email and subtitle translation, language
    detection, the language catalog, account info and i18n file jobs.

    Example:
        async with TranslatePlusClient(api_key="your-api-key") as client:
            result = await client.translate("Hello, world!", target="fr")
            print(result["translations"])
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        max_concurrent: int = DEFAULT_MAX_CONCURRENT,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize TranslatePlusClient.

        Args:
            api_key: TranslatePlus API key.
            base_url: API base URL.
            timeout: Per-attempt timeout in seconds.
            max_retries: Retries after a transport failure.
            max_concurrent: Maximum concurrent requests.
            config: Prebuilt configuration. When given, api_key, base_url,
                timeout, max_retries and max_concurrent are ignored.

        Raises:
            ValidationError: If the API key is missing or a setting is invalid.
        """
        if config is None:
            config = ClientConfig(
                api_key=api_key or "",
                base_url=base_url,
                timeout=timeout,
                max_retries=max_retries,
                max_concurrent=max_concurrent,
            )
        self._config = config
        self._dispatcher = RequestDispatcher(config)

    @classmethod
    def from_env(cls, **overrides: Any) -> TranslatePlusClient:
        """Create a client configured from TRANSLATEPLUS_* environment variables."""
        return cls(config=ClientConfig.from_env(**overrides))

    @property
    def config(self) -> ClientConfig:
        """Return the client configuration."""
        return self._config

    async def __aenter__(self) -> TranslatePlusClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._dispatcher.close()

    async def translate(
        self,
        text: str,
        target: str,
        source: str = "auto",
    ) -> dict[str, Any]:
        """Translate a single text.

        Args:
            text: Text to translate.
            target: Target language code.
            source: Source language code, or "auto" for detection.

        Returns:
            Translation result.
        """
        data = {"text": text, "source": source, "target": target}
        return await self._dispatcher.request("POST", "/v2/translate", data=data)

    async def translate_batch(
        self,
        texts: list[str],
        target: str,
        source: str = "auto",
    ) -> dict[str, Any]:
        """Translate up to 100 texts in a single request.

        Args:
            texts: Texts to translate.
            target: Target language code.
            source: Source language code, or "auto" for detection.

        Returns:
            Batch translation result.

        Raises:
            ValidationError: If texts is empty or has more than 100 entries.
        """
        if not texts:
            raise ValidationError("Texts list cannot be empty")
        if len(texts) > MAX_BATCH_SIZE:
            raise ValidationError(
                f"Maximum {MAX_BATCH_SIZE} texts allowed per batch request"
            )

        data = {"texts": list(texts), "source": source, "target": target}
        return await self._dispatcher.request("POST", "/v2/translate/batch", data=data)

    async def translate_html(
        self,
        html: str,
        target: str,
        source: str = "auto",
    ) -> dict[str, Any]:
        """Translate HTML content, preserving tags and structure."""
        data = {"html": html, "source": source, "target": target}
        return await self._dispatcher.request("POST", "/v2/translate/html", data=data)

    async def translate_email(
        self,
        subject: str,
        email_body: str,
        target: str,
        source: str = "auto",
    ) -> dict[str, Any]:
        """Translate an email subject and HTML body."""
        data = {
            "subject": subject,
            "email_body": email_body,
            "source": source,
            "target": target,
        }
        return await self._dispatcher.request("POST", "/v2/translate/email", data=data)

    async def translate_subtitles(
        self,
        content: str,
        target: str,
        format: str = "srt",
        source: str = "auto",
    ) -> dict[str, Any]:
        """Translate subtitle content.

        Args:
            content: Subtitle file content.
            target: Target language code.
            format: Subtitle format, "srt" or "vtt".
            source: Source language code, or "auto" for detection.

        Returns:
            Translated subtitle content.

        Raises:
            ValidationError: If format is not "srt" or "vtt".
        """
        if format not in SUBTITLE_FORMATS:
            raise ValidationError("Format must be 'srt' or 'vtt'")

        data = {"content": content, "format": format, "source": source, "target": target}
        return await self._dispatcher.request("POST", "/v2/translate/subtitles", data=data)

    async def detect_language(self, text: str) -> dict[str, Any]:
        """Detect the language of a text."""
        return await self._dispatcher.request(
            "POST", "/v2/language_detect", data={"text": text}
        )

    async def get_supported_languages(self) -> dict[str, Any]:
        """Get the catalog of supported languages."""
        return await self._dispatcher.request("GET", "/v2/supported_languages")

    async def get_account_summary(self) -> dict[str, Any]:
        """Get account summary (credits, plan, concurrency limit)."""
        return await self._dispatcher.request("GET", "/v2/account/summary")

    async def create_i18n_job(
        self,
        file_path: str | Path,
        target_languages: list[str],
        source_language: str = "auto",
        webhook_url: str | None = None,
    ) -> dict[str, Any]:
        """Create an asynchronous i18n file translation job.

        Args:
            file_path: Path to the localization file (JSON, YAML, PO, etc.).
            target_languages: Target language codes.
            source_language: Source language code, or "auto" for detection.
            webhook_url: Optional URL notified when the job completes.

        Returns:
            Job creation result (includes the job id).

        Raises:
            ValidationError: If the file does not exist or target_languages is empty.
        """
        path = Path(file_path)
        if not path.is_file():
            raise ValidationError(f"File not found: {file_path}")
        if not target_languages:
            raise ValidationError("target_languages must be a non-empty list")

        form: dict[str, Any] = {
            "source_language": source_language,
            "target_languages": ",".join(target_languages),
        }
        if webhook_url:
            form["webhook_url"] = webhook_url

        return await self._dispatcher.request(
            "POST", "/v2/i18n/create_job", data=form, files={"file": path}
        )

    async def get_i18n_job_status(self, job_id: str) -> dict[str, Any]:
        """Get the status of an i18n job."""
        return await self._dispatcher.request("GET", f"/v2/i18n/job/{job_id}")

    async def list_i18n_jobs(self, page: int = 1, page_size: int = 10) -> dict[str, Any]:
        """List i18n jobs, one page at a time."""
        params = {"page": page, "page_size": page_size}
        return await self._dispatcher.request("GET", "/v2/i18n/jobs", params=params)

#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Advanced TranslatePlus usage: custom settings, HTML, email, concurrency, errors.

Usage:
    cd examples
    python advanced_example.py

Environment variables (loaded from .env automatically):
    TRANSLATEPLUS_API_KEY: required
"""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project src to path (development use)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Settings
# =============================================================================

TIMEOUT = 60.0
MAX_RETRIES = 5
MAX_CONCURRENT = 10

# Shows request and retry logs from the dispatcher
VERBOSE = False


async def main() -> None:
    from translateplus import (
        APIError,
        TranslatePlusClient,
        TranslatePlusError,
        ValidationError,
    )

    if VERBOSE:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")

    api_key = os.environ.get("TRANSLATEPLUS_API_KEY")
    if not api_key:
        print("Error: TRANSLATEPLUS_API_KEY environment variable is not set")
        sys.exit(1)

    async with TranslatePlusClient(
        api_key,
        timeout=TIMEOUT,
        max_retries=MAX_RETRIES,
        max_concurrent=MAX_CONCURRENT,
    ) as client:
        try:
            print("=== HTML Translation ===")
            html = "<div><h1>Welcome</h1><p>This is a <strong>test</strong>.</p></div>"
            html_result = await client.translate_html(html, target="fr", source="en")
            print(f"Translated HTML:\n{html_result.get('html')}")
            print()

            print("=== Email Translation ===")
            email_result = await client.translate_email(
                "Welcome to our service",
                "<p>Thank you for signing up! We are excited to have you.</p>",
                target="es",
                source="en",
            )
            print(f"Subject: {email_result.get('subject')}")
            print(f"Body: {email_result.get('html_body')}")
            print()

            print("=== Concurrent Translation ===")
            # Requests beyond MAX_CONCURRENT wait for a free slot
            targets = ["fr", "de", "es", "it", "pt", "ja"]
            results = await asyncio.gather(
                *(client.translate("Good morning", target=t, source="en") for t in targets)
            )
            for target, result in zip(targets, results):
                print(f"  {target}: {result['translations']['translation']}")
            print()

            print("=== Error Handling Example ===")
            try:
                await client.translate("Hello", target="invalid-language", source="en")
            except APIError as e:
                print(f"API Error: {e}")
                print(f"Status Code: {e.status_code}")

            try:
                await client.translate_subtitles("WEBVTT", target="fr", format="ass")
            except ValidationError as e:
                print(f"Validation Error: {e}")
        except TranslatePlusError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

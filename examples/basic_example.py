#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Basic TranslatePlus usage.

Usage:
    cd examples
    python basic_example.py

Environment variables (loaded from .env automatically):
    TRANSLATEPLUS_API_KEY: required
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add project src to path (development use)
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

load_dotenv(PROJECT_ROOT / ".env")


async def main() -> None:
    from translateplus import TranslatePlusClient, TranslatePlusError

    try:
        client = TranslatePlusClient.from_env()
    except TranslatePlusError as e:
        print(f"Error: {e}")
        print("Set it with: export TRANSLATEPLUS_API_KEY='your-api-key'")
        sys.exit(1)

    async with client:
        try:
            print("=== Basic Translation ===")
            result = await client.translate("Hello, world!", target="fr", source="en")
            print(f"Translation: {result['translations']['translation']}")
            print()

            print("=== Batch Translation ===")
            batch = await client.translate_batch(
                ["Hello", "Goodbye", "Thank you"], target="fr", source="en"
            )
            for translation in batch["translations"]:
                print(f"- {translation['translation']}")
            print()

            print("=== Language Detection ===")
            detected = await client.detect_language("Bonjour le monde")
            detection = detected["language_detection"]
            print(f"Detected language: {detection['language']}")
            print(f"Confidence: {detection['confidence']}")
            print()

            print("=== Supported Languages ===")
            languages = (await client.get_supported_languages())["supported_languages"]
            print(f"Total languages: {len(languages)}")
            for code, name in list(languages.items())[:5]:
                print(f"  {code}: {name}")
            print()

            print("=== Account Summary ===")
            summary = await client.get_account_summary()
            print(f"Credits remaining: {summary.get('credits_remaining')}")
            print(f"Plan: {summary.get('plan_name')}")
            print(f"Concurrency limit: {summary.get('concurrency_limit')}")
        except TranslatePlusError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

#!/usr/bin/env python3
# SPDX-License-Identifier: Apache-2.0
"""Translate a localization file with an i18n job and poll until it finishes.

Usage:
    cd examples
    python i18n_job.py path/to/en.json fr,de,es

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

POLL_INTERVAL = 5.0
FINISHED_STATES = {"completed", "failed", "cancelled"}


async def main(file_path: Path, target_languages: list[str]) -> None:
    from translateplus import TranslatePlusClient, TranslatePlusError

    async with TranslatePlusClient.from_env() as client:
        try:
            job = await client.create_i18n_job(file_path, target_languages)
            job_id = job.get("job_id") or job.get("id")
            print(f"Created job {job_id}")

            while True:
                status = await client.get_i18n_job_status(str(job_id))
                state = str(status.get("status", "")).lower()
                print(f"  status: {state or 'unknown'}")
                if state in FINISHED_STATES:
                    break
                await asyncio.sleep(POLL_INTERVAL)

            print(status)
        except TranslatePlusError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(Path(sys.argv[1]), sys.argv[2].split(",")))

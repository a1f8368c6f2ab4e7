# SPDX-License-Identifier: Apache-2.0
"""
TranslatePlus - CLI Tool

Calls the TranslatePlus API from the command line and prints the JSON result.

Usage:
    translateplus <command> [options]

Examples:
    translateplus translate "Hello, world!" -t fr
    translateplus batch Hello Goodbye "Thank you" -t es
    translateplus subtitles movie.srt -t de
    translateplus i18n-create locales/en.json -t fr,de,es
    translateplus i18n-status <job-id>
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, NoReturn

from dotenv import load_dotenv

from translateplus.client import TranslatePlusClient
from translateplus.config import ClientConfig
from translateplus.errors import APIError, TranslatePlusError

logger = logging.getLogger(__name__)


def _split_languages(value: str) -> list[str]:
    """Split a comma-separated language list."""
    return [lang.strip() for lang in value.split(",") if lang.strip()]


def _add_language_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--target",
        required=True,
        help="Target language code",
    )
    parser.add_argument(
        "-s",
        "--source",
        default="auto",
        help="Source language code (default: auto)",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser.

    Returns:
        Configured ArgumentParser.
    """
    parser = argparse.ArgumentParser(
        prog="translateplus",
        description="TranslatePlus API command line client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s translate "Hello, world!" -t fr          # Single text
  %(prog)s batch Hello Goodbye -t es                # Batch (max 100 texts)
  %(prog)s html page.html -t de                     # HTML file
  %(prog)s subtitles movie.vtt -t ja                # Subtitle file (srt/vtt)
  %(prog)s detect "Bonjour le monde"                # Language detection
  %(prog)s i18n-create en.json -t fr,de             # i18n file job
  %(prog)s i18n-jobs --page 2                       # List jobs

Environment Variables:
  TRANSLATEPLUS_API_KEY         API key (required unless --api-key is given)
  TRANSLATEPLUS_BASE_URL        API base URL
  TRANSLATEPLUS_TIMEOUT         Request timeout in seconds
  TRANSLATEPLUS_MAX_RETRIES     Retries on network failure
  TRANSLATEPLUS_MAX_CONCURRENT  Maximum concurrent requests

Variables are also read from a .env file in the current directory.
""",
    )

    # Client options
    client_group = parser.add_argument_group("Client options")
    client_group.add_argument(
        "--api-key",
        help="TranslatePlus API key (or set TRANSLATEPLUS_API_KEY)",
    )
    client_group.add_argument(
        "--base-url",
        help="API base URL (default: https://api.translateplus.io)",
    )
    client_group.add_argument(
        "--timeout",
        type=float,
        help="Request timeout in seconds (default: 30)",
    )
    client_group.add_argument(
        "--max-retries",
        type=int,
        help="Retries on network failure (default: 3)",
    )
    client_group.add_argument(
        "--max-concurrent",
        type=int,
        help="Maximum concurrent requests (default: 5)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    translate = subparsers.add_parser("translate", help="Translate a single text")
    translate.add_argument("text", help="Text to translate")
    _add_language_args(translate)

    batch = subparsers.add_parser("batch", help="Translate up to 100 texts")
    batch.add_argument("texts", nargs="+", help="Texts to translate")
    _add_language_args(batch)

    html = subparsers.add_parser("html", help="Translate an HTML file")
    html.add_argument("file", type=Path, help="HTML file")
    _add_language_args(html)

    email = subparsers.add_parser("email", help="Translate an email")
    email.add_argument("--subject", required=True, help="Email subject")
    email.add_argument("body", type=Path, help="File containing the HTML email body")
    _add_language_args(email)

    subtitles = subparsers.add_parser("subtitles", help="Translate an SRT or VTT file")
    subtitles.add_argument("file", type=Path, help="Subtitle file")
    subtitles.add_argument(
        "-f",
        "--format",
        choices=["srt", "vtt"],
        help="Subtitle format (default: from file extension)",
    )
    _add_language_args(subtitles)

    detect = subparsers.add_parser("detect", help="Detect the language of a text")
    detect.add_argument("text", help="Text to analyze")

    subparsers.add_parser("languages", help="List supported languages")
    subparsers.add_parser("account", help="Show account summary")

    i18n_create = subparsers.add_parser("i18n-create", help="Create an i18n file job")
    i18n_create.add_argument("file", type=Path, help="Localization file")
    i18n_create.add_argument(
        "-t",
        "--targets",
        required=True,
        type=_split_languages,
        help="Comma-separated target language codes",
    )
    i18n_create.add_argument(
        "-s",
        "--source",
        default="auto",
        help="Source language code (default: auto)",
    )
    i18n_create.add_argument("--webhook-url", help="Webhook notified on completion")

    i18n_status = subparsers.add_parser("i18n-status", help="Show i18n job status")
    i18n_status.add_argument("job_id", help="Job ID")

    i18n_jobs = subparsers.add_parser("i18n-jobs", help="List i18n jobs")
    i18n_jobs.add_argument("--page", type=int, default=1, help="Page number (default: 1)")
    i18n_jobs.add_argument(
        "--page-size", type=int, default=10, help="Page size (default: 10)"
    )

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Returns:
        Parsed argument Namespace.
    """
    return build_parser().parse_args(argv)


def create_client(args: argparse.Namespace) -> TranslatePlusClient:
    """Create a client from CLI options and the environment.

    Raises:
        SystemExit: If no API key is available.
    """
    api_key = args.api_key or os.environ.get(ClientConfig.ENV_VARS["api_key"], "")
    if not api_key:
        print(
            "Error: TranslatePlus API key is required.\n"
            "  Set --api-key option or TRANSLATEPLUS_API_KEY environment variable.",
            file=sys.stderr,
        )
        sys.exit(1)

    config = ClientConfig.from_env(
        api_key=api_key,
        base_url=args.base_url,
        timeout=args.timeout,
        max_retries=args.max_retries,
        max_concurrent=args.max_concurrent,
    )
    return TranslatePlusClient(config=config)


def subtitle_format(path: Path, explicit: str | None) -> str:
    """Resolve the subtitle format from the option or the file extension."""
    if explicit:
        return explicit
    return path.suffix.lower().lstrip(".") or "srt"


async def execute(client: TranslatePlusClient, args: argparse.Namespace) -> dict[str, Any]:
    """Run the selected command.

    Returns:
        API response.
    """
    command = args.command

    if command == "translate":
        return await client.translate(args.text, target=args.target, source=args.source)
    elif command == "batch":
        return await client.translate_batch(args.texts, target=args.target, source=args.source)
    elif command == "html":
        html = args.file.read_text(encoding="utf-8")
        return await client.translate_html(html, target=args.target, source=args.source)
    elif command == "email":
        body = args.body.read_text(encoding="utf-8")
        return await client.translate_email(
            args.subject, body, target=args.target, source=args.source
        )
    elif command == "subtitles":
        content = args.file.read_text(encoding="utf-8")
        return await client.translate_subtitles(
            content,
            target=args.target,
            format=subtitle_format(args.file, args.format),
            source=args.source,
        )
    elif command == "detect":
        return await client.detect_language(args.text)
    elif command == "languages":
        return await client.get_supported_languages()
    elif command == "account":
        return await client.get_account_summary()
    elif command == "i18n-create":
        return await client.create_i18n_job(
            args.file,
            args.targets,
            source_language=args.source,
            webhook_url=args.webhook_url,
        )
    elif command == "i18n-status":
        return await client.get_i18n_job_status(args.job_id)
    elif command == "i18n-jobs":
        return await client.list_i18n_jobs(page=args.page, page_size=args.page_size)
    else:
        raise ValueError(f"Unknown command: {command}")


async def run(args: argparse.Namespace) -> int:
    """Execute the selected command and print its result.

    Returns:
        Exit code (0: success, 1: failure).
    """
    try:
        client = create_client(args)
    except TranslatePlusError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Running '%s' against %s", args.command, client.config.base_url)
    try:
        async with client:
            result = await execute(client, args)
    except TranslatePlusError as e:
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, APIError) and e.status_code is not None:
            print(f"  Status code: {e.status_code}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


def main() -> NoReturn:
    """Main entry point."""
    load_dotenv()
    args = parse_args()

    # Configure logging
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    exit_code = asyncio.run(run(args))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()

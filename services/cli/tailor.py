"""
Command-line front end for the tailoring backend.

Runs the same TailorClient cycle as the web console and prints the result
sections as plain text.
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import httpx
from pydantic import TypeAdapter

from shared.schemas.tailor import InteractionState, Success
from shared.utils.logging import setup_logging
from services.web.config import get_config
from services.web.exceptions import ClipboardUnavailableError
from services.web.render import render_text
from services.web.tailor_client import TailorClient, copy_tailored_resume, system_clipboard

logger = logging.getLogger(__name__)

STDIN = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tailor a resume to a job description via the tailoring backend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_cli.py --resume resume.txt --job jd.txt
  python run_cli.py --resume resume.txt --job jd.txt --role "Senior Product Manager" --copy
  pbpaste | python run_cli.py --resume - --job jd.txt --json
        """
    )

    parser.add_argument(
        "--resume",
        required=True,
        help="Path to the resume text file, or - for stdin"
    )
    parser.add_argument(
        "--job",
        required=True,
        help="Path to the job description text file, or - for stdin"
    )
    parser.add_argument(
        "--role",
        default="",
        help="Target role title (optional)"
    )
    parser.add_argument(
        "--backend",
        help="Backend base URL (default: TAILOR_BACKEND_URL / BACKEND_URL or http://localhost:8000)"
    )
    parser.add_argument(
        "--copy",
        action="store_true",
        help="Copy the tailored resume to the clipboard"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final state as JSON instead of text"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def read_text(source: str) -> str:
    """Read a file, or stdin for '-'."""
    if source == STDIN:
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


async def tailor_from_args(
    args: argparse.Namespace,
    resume: str,
    job_description: str,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> InteractionState:
    config = get_config()
    backend = args.backend or config.backend_url

    async with httpx.AsyncClient(
        timeout=config.http_timeout,
        follow_redirects=True,
        transport=transport,
    ) as http_client:
        client = TailorClient(backend_base=backend, http_client=http_client)
        return await client.submit(resume, job_description, args.role)


def main(
    argv: Optional[List[str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.resume == STDIN and args.job == STDIN:
        parser.error("only one of --resume and --job can read from stdin")

    setup_logging(level="DEBUG" if args.verbose else "WARNING")

    try:
        resume = read_text(args.resume)
        job_description = read_text(args.job)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    state = asyncio.run(tailor_from_args(args, resume, job_description, transport=transport))

    if args.json:
        print(json.dumps(TypeAdapter(InteractionState).dump_python(state, mode="json"), indent=2))
    else:
        print(render_text(state), end="")

    if args.copy:
        try:
            if copy_tailored_resume(state, system_clipboard):
                print("Tailored resume copied to clipboard.", file=sys.stderr)
        except ClipboardUnavailableError as e:
            logger.warning(f"Clipboard unavailable: {e}")
            print(f"Warning: could not copy to clipboard: {e}", file=sys.stderr)

    return 0 if isinstance(state, Success) else 1

"""Command-line entry point.

Usage:
    atcoder-init abc100 -u alice
    atcoder-init https://atcoder.jp/contests/abc100 --no-login -r ~/contests
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from loguru import logger

from atcoder_init import __version__
from atcoder_init.application.orchestrator import ContestInitOrchestrator
from atcoder_init.config import PASSWORD_ENV, USERNAME_ENV, InitOptions, env_default
from atcoder_init.domain.exceptions import AtCoderInitError
from atcoder_init.infrastructure.cookie_store import DEFAULT_COOKIE_FILE
from atcoder_init.infrastructure.http_client import AsyncHTTPClient
from atcoder_init.services import create_services

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atcoder-init",
        description="Create a Cargo project with sample tests for an AtCoder contest.",
    )
    parser.add_argument("contest_id", help="Contest id (e.g. abc100) or contest URL")
    parser.add_argument("-u", "--username", default=env_default(USERNAME_ENV), help="AtCoder username")
    parser.add_argument("-p", "--password", default=env_default(PASSWORD_ENV), help="AtCoder password")
    parser.add_argument(
        "-c",
        "--cookie",
        type=Path,
        default=Path(DEFAULT_COOKIE_FILE),
        help=f"Cookie file (default: ./{DEFAULT_COOKIE_FILE})",
    )
    parser.add_argument(
        "--no-login", action="store_true", help="Do not log in when no cookie file exists"
    )
    parser.add_argument(
        "-r", "--root", type=Path, default=None, help="Directory to create the project in (default: CWD)"
    )
    parser.add_argument(
        "-d", "--dependencies", type=Path, default=None, help="File with the [dependencies] body"
    )
    parser.add_argument("-t", "--template", type=Path, default=None, help="Per-task source template file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_options(argv: Optional[Sequence[str]] = None) -> InitOptions:
    args = build_parser().parse_args(argv)
    options = {
        "contest_id": args.contest_id,
        "username": args.username,
        "password": args.password,
        "cookie_path": args.cookie,
        "no_login": args.no_login,
        "dependencies_path": args.dependencies,
        "template_path": args.template,
        "verbose": args.verbose,
    }
    if args.root is not None:
        options["project_root"] = args.root
    return InitOptions(**options)


def configure_logging(verbose: bool) -> None:
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "INFO", format=LOG_FORMAT)


async def run(options: InitOptions) -> Path:
    async with AsyncHTTPClient() as http_client:
        auth_service, contest_service = create_services(http_client)
        orchestrator = ContestInitOrchestrator(auth_service, contest_service)
        return await orchestrator.run(options)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point; returns the process exit code."""
    load_dotenv()

    try:
        options = parse_options(argv)
    except AtCoderInitError as e:
        configure_logging(False)
        logger.error(str(e))
        return 1

    configure_logging(options.verbose)

    try:
        project_dir = asyncio.run(run(options))
    except AtCoderInitError as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130

    logger.info(f"Done: {project_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

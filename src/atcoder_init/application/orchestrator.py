"""Async orchestrator for the contest-fetch pipeline."""

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, Optional

from loguru import logger

from atcoder_init.config import InitOptions
from atcoder_init.domain.exceptions import FileSystemError
from atcoder_init.domain.models import CookieJar, Credentials
from atcoder_init.domain.templates import DEFAULT_DEPENDENCIES, DEFAULT_TEMPLATE
from atcoder_init.infrastructure.cookie_store import CookieStore
from atcoder_init.infrastructure.terminal import prompt as terminal_prompt
from atcoder_init.services import AuthService, ContestService, ProjectGenerator

PromptFunc = Callable[[str, bool], Awaitable[str]]


class SessionSource(enum.Enum):
    """How the cookie jar of a run was obtained."""

    LOADED = "loaded"
    UNAUTHENTICATED = "unauthenticated"
    LOGGED_IN = "logged_in"


@dataclass
class Session:
    """Cookie jar ready to be replayed, plus the user it belongs to (if known)."""

    jar: CookieJar
    source: SessionSource
    username: Optional[str] = None


class ContestInitOrchestrator:
    """Coordinates login, scraping and project generation."""

    def __init__(
        self,
        auth_service: AuthService,
        contest_service: ContestService,
        prompt: PromptFunc = terminal_prompt,
    ):
        """
        Initialize orchestrator with dependency injection.

        Args:
            auth_service: Login handshake service
            contest_service: Task list and sample scraping service
            prompt: Coroutine asking the user for a missing credential
        """
        self.auth_service = auth_service
        self.contest_service = contest_service
        self.prompt = prompt

    async def run(self, options: InitOptions) -> Path:
        """Create the project for ``options.contest_id`` and return its directory."""
        contest = options.contest
        logger.info(f"Bootstrapping contest {contest}")

        generator = ProjectGenerator(options.project_root)
        generator.ensure_absent(contest)

        dependencies = read_override(options.dependencies_path, DEFAULT_DEPENDENCIES)
        template = read_override(options.template_path, DEFAULT_TEMPLATE)

        logger.info("Step 1: Acquiring session")
        session = await self.acquire_session(options)

        logger.info("Step 2: Fetching tasks and samples")
        samples = await self.contest_service.get_contest_samples(contest, session.jar)

        logger.info("Step 3: Generating project")
        return generator.generate(
            contest,
            session.username,
            dependencies,
            template,
            samples,
        )

    async def acquire_session(self, options: InitOptions) -> Session:
        """
        Reuse the cookie file when present, otherwise log in and save it.

        With ``no_login`` and no cookie file the run continues unauthenticated.
        """
        store = CookieStore(options.cookie_path)

        if store.exists():
            logger.info(f"Using cookies from {store.path}")
            return Session(store.load(), SessionSource.LOADED, options.username)

        if options.no_login:
            logger.info("No cookie file, continuing without login")
            return Session(CookieJar(), SessionSource.UNAUTHENTICATED, options.username)

        credentials = await self.complete_credentials(options.credentials)
        jar = await self.auth_service.login(credentials)
        store.save(jar)
        return Session(jar, SessionSource.LOGGED_IN, credentials.username)

    async def complete_credentials(self, credentials: Credentials) -> Credentials:
        """Ask for whichever of username and password is missing."""
        username = credentials.username or await self.prompt("Username: ", False)
        password = credentials.password or await self.prompt("Password: ", True)
        return Credentials(username=username, password=password)


def read_override(path: Optional[Path], default: str) -> str:
    """Read a user-supplied file, falling back to the built-in text."""
    if path is None:
        return default

    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileSystemError(f"Failed to read {path}: {e}") from e

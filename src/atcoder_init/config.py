"""Validated run options."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from atcoder_init.domain.models import ContestIdentifier, Credentials
from atcoder_init.infrastructure.cookie_store import DEFAULT_COOKIE_FILE
from atcoder_init.infrastructure.parsers import URLParser

USERNAME_ENV = "ATCODER_USERNAME"
PASSWORD_ENV = "ATCODER_PASSWORD"


class InitOptions(BaseModel):
    """Options for one invocation, built from the command line."""

    contest_id: str
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    cookie_path: Path = Path(DEFAULT_COOKIE_FILE)
    no_login: bool = False
    project_root: Path = Field(default_factory=Path.cwd)
    dependencies_path: Path | None = None
    template_path: Path | None = None
    verbose: bool = False

    @field_validator("contest_id")
    @classmethod
    def normalize_contest_id(cls, value: str) -> str:
        """Accept a contest URL as well as a bare id."""
        return URLParser.parse_contest_id(value).contest_id

    @property
    def contest(self) -> ContestIdentifier:
        return ContestIdentifier(contest_id=self.contest_id)

    @property
    def credentials(self) -> Credentials:
        return Credentials(username=self.username, password=self.password)


def env_default(name: str) -> str | None:
    """Read an optional default from the environment (populated from .env)."""
    return os.environ.get(name) or None

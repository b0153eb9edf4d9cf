"""Parser and builder for AtCoder URLs."""

import re
from urllib.parse import urljoin, urlparse

from loguru import logger

from atcoder_init.domain.exceptions import InvalidStateError, URLError
from atcoder_init.domain.models import ContestIdentifier

BASE_URL = "https://atcoder.jp/"


class URLParser:
    """Parser for AtCoder contest URLs and builder for the endpoints we hit."""

    # Contest pattern matches: atcoder.jp/contests/abc100 (optionally followed by a path)
    CONTEST_PATTERN = r"atcoder\.jp/contests/([^/?#]+)"

    @classmethod
    def parse_contest_id(cls, value: str) -> ContestIdentifier:
        """
        Accept either a bare contest id or a contest URL.
        """
        value = value.strip()
        if "://" in value:
            return cls.parse_contest_url(value)

        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise InvalidStateError(f"{value!r} is not a valid contest id")

        return ContestIdentifier(contest_id=value)

    @classmethod
    def parse_contest_url(cls, url: str) -> ContestIdentifier:
        """
        Parse AtCoder contest URL and extract contest identifier.
        """
        logger.debug(f"Parsing contest URL: {url}")

        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise URLError(f"Failed to parse URL: {url}") from e
        if not parsed.scheme or not parsed.netloc:
            raise URLError(f"Invalid URL format: {url}")

        match = re.search(cls.CONTEST_PATTERN, url)
        if match:
            identifier = ContestIdentifier(contest_id=match.group(1))
            logger.debug(f"Parsed URL to contest: {identifier}")
            return identifier

        raise URLError(
            f"Unrecognized AtCoder contest URL format: {url}. "
            "Expected format: https://atcoder.jp/contests/<contest_id>"
        )

    @classmethod
    def build_login_url(cls, base_url: str = BASE_URL) -> str:
        return cls.resolve(base_url, "login")

    @classmethod
    def build_tasks_url(cls, identifier: ContestIdentifier, base_url: str = BASE_URL) -> str:
        """
        Build the task list URL of a contest.
        """
        url = cls.resolve(base_url, f"contests/{identifier.contest_id}/tasks")
        logger.debug(f"Built tasks URL: {url}")
        return url

    @classmethod
    def resolve(cls, base_url: str, reference: str) -> str:
        """
        Join a relative reference (e.g. a task href) against the site root.
        """
        try:
            url = urljoin(base_url, reference)
            parsed = urlparse(url)
        except ValueError as e:
            raise URLError(f"Failed to join {reference!r} onto {base_url}") from e

        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise URLError(f"Failed to join {reference!r} onto {base_url}")

        return url

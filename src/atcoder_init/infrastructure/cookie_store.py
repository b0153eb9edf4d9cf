"""Flat-file persistence for the authenticated cookie jar."""

import re
from pathlib import Path

from loguru import logger

from atcoder_init.domain.exceptions import FileSystemError
from atcoder_init.domain.models import CookieJar

DEFAULT_COOKIE_FILE = "cookie.txt"

# Control characters other than horizontal tab cannot appear in a header value.
_INVALID_HEADER_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]")


def is_valid_header_value(value: str) -> bool:
    return bool(value.strip()) and not _INVALID_HEADER_CHARS.search(value)


class CookieStore:
    """Loads and saves cookie header values, one per line."""

    def __init__(self, path: Path | str = DEFAULT_COOKIE_FILE):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> CookieJar:
        """
        Load the cookie jar from disk.

        Blank lines and lines that are not valid header values are skipped.

        Raises:
            FileSystemError: If the file cannot be read
        """
        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileSystemError(f"Failed to read cookie file {self.path}: {e}") from e

        values = []
        for line in content.split("\n"):
            line = line.rstrip("\r")
            if not is_valid_header_value(line):
                continue
            values.append(line)

        logger.debug(f"Loaded {len(values)} cookie(s) from {self.path}")
        return CookieJar(values)

    def save(self, jar: CookieJar) -> None:
        """
        Save the cookie jar, creating the parent directory if needed.

        Raises:
            FileSystemError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("\n".join(jar.values), encoding="utf-8")
        except OSError as e:
            raise FileSystemError(f"Failed to write cookie file {self.path}: {e}") from e

        logger.info(f"Saved {len(jar)} cookie(s) to {self.path}")

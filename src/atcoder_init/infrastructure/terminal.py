"""Interactive prompts on the controlling terminal."""

import asyncio
import getpass
import sys

from atcoder_init.domain.exceptions import FileSystemError


async def prompt(label: str, secret: bool = False) -> str:
    """Print ``label`` and read one line from stdin without blocking the event loop."""
    return await asyncio.to_thread(read_line, label, secret)


def read_line(label: str, secret: bool = False) -> str:
    """
    Read one line from stdin, trimmed of trailing whitespace.

    Secrets are read without echo when stdin is a terminal.

    Raises:
        FileSystemError: If stdin is closed or unreadable
    """
    try:
        if secret and sys.stdin.isatty():
            line = getpass.getpass(label)
        else:
            print(label, end="", flush=True)
            line = sys.stdin.readline()
            if not line:
                raise EOFError("end of input")
    except (EOFError, OSError) as e:
        raise FileSystemError(f"Failed to read from stdin: {e}") from e

    return line.rstrip()

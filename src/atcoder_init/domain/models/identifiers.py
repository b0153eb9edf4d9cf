"""Value objects for contest identification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContestIdentifier:
    """Identifies a specific AtCoder contest."""

    contest_id: str

    def __str__(self) -> str:
        """String representation."""
        return self.contest_id


@dataclass(frozen=True)
class Credentials:
    """Login credentials; a missing field is asked for interactively."""

    username: str | None = None
    password: str | None = None

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password=***)"

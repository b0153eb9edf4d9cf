"""Value objects for scraped contest data."""

from dataclasses import dataclass, field
from typing import NamedTuple

COOKIE_HEADER = "Cookie"


@dataclass(frozen=True)
class TaskEntry:
    """A row of the contest task list."""

    name: str
    href: str

    @property
    def slug(self) -> str:
        return task_slug(self.name)


class Sample(NamedTuple):
    """A sample input paired with its expected output."""

    input: str
    output: str


@dataclass(frozen=True)
class SampleBlock:
    """A single numbered example block found on a task page."""

    text: str
    index: str
    is_input: bool


@dataclass
class CookieJar:
    """Ordered cookie header values (``name=value``) replayed on every request."""

    values: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def contains(self, needle: str) -> bool:
        """Check whether any cookie value contains ``needle`` literally."""
        return any(needle in value for value in self.values)

    def as_headers(self) -> dict[str, str]:
        """Render the jar as request headers bound to the cookie header name."""
        if not self.values:
            return {}
        return {COOKIE_HEADER: "; ".join(self.values)}


TaskSamples = dict[str, list[Sample]]


def task_slug(name: str) -> str:
    """File-system safe name of a task: the lowercased display name."""
    return name.lower()

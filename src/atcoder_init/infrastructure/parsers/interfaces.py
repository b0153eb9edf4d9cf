"""Protocol interfaces for parsers and the HTTP client."""

from typing import Any, Mapping, Optional, Protocol

from atcoder_init.domain.models import Sample, TaskEntry


class TaskListParserProtocol(Protocol):
    """Protocol for parsing the contest task list page."""

    def parse(self, html: str) -> list[TaskEntry]:
        """Extract task entries from the task list HTML."""
        ...


class SampleParserProtocol(Protocol):
    """Protocol for parsing task detail pages."""

    def parse(self, html: str) -> list[Sample]:
        """Extract paired samples from the task HTML."""
        ...


class HTTPClientProtocol(Protocol):
    """Protocol for HTTP client."""

    async def get(self, url: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """Send a gated GET request."""
        ...

    async def post(
        self,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """Send a gated form POST request."""
        ...

    async def get_text(self, url: str, headers: Optional[Mapping[str, str]] = None) -> str:
        """Get text content from URL."""
        ...

    def set_cookie_values(self, response: Any) -> list[str]:
        """Raw Set-Cookie values of a response."""
        ...

    def cookie_headers(self) -> list[str]:
        """Cookies accumulated by the client as ``name=value``."""
        ...

    def clear_cookies(self) -> None:
        """Forget accumulated cookies."""
        ...

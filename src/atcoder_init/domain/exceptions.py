"""Domain exceptions for atcoder-init."""


class AtCoderInitError(Exception):
    """Base exception for all atcoder-init errors."""

    pass


class HTTPStatusError(AtCoderInitError):
    """A gated HTTP call returned a status other than 200."""

    def __init__(self, status_code: int, url: str = ""):
        self.status_code = status_code
        self.url = url
        message = f"HTTP {status_code}"
        if url:
            message = f"{message} from {url}"
        super().__init__(message)


class TransportError(AtCoderInitError):
    """Network, TLS or body-decoding failure."""

    pass


class FileSystemError(AtCoderInitError):
    """Filesystem read/write, directory creation or stdin read failure."""

    pass


class URLError(AtCoderInitError):
    """URL parsing or relative-join failure."""

    pass


class InvalidStateError(AtCoderInitError):
    """A semantic precondition was violated."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Invalid: {message}")

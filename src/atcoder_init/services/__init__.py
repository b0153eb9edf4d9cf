from atcoder_init.infrastructure.http_client import AsyncHTTPClient

from .auth import AuthService
from .contest import ContestService
from .project import ProjectGenerator


def create_services(http_client: AsyncHTTPClient) -> tuple[AuthService, ContestService]:
    """Factory function to create the network services sharing one client."""
    return AuthService(http_client=http_client), ContestService(http_client=http_client)


__all__ = ["AuthService", "ContestService", "ProjectGenerator", "create_services"]

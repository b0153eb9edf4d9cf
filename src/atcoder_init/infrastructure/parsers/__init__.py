"""Parsers for extracting data from AtCoder pages."""

from .csrf import cookie_pairs, extract_csrf_token
from .interfaces import HTTPClientProtocol, SampleParserProtocol, TaskListParserProtocol
from .sample_parser import SampleParser
from .task_list_parser import TaskListParser
from .url_parser import BASE_URL, URLParser

__all__ = [
    "BASE_URL",
    "HTTPClientProtocol",
    "SampleParser",
    "SampleParserProtocol",
    "TaskListParser",
    "TaskListParserProtocol",
    "URLParser",
    "cookie_pairs",
    "extract_csrf_token",
]

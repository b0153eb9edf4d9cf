"""Domain models package."""

from .identifiers import ContestIdentifier, Credentials
from .task import COOKIE_HEADER, CookieJar, Sample, SampleBlock, TaskEntry, TaskSamples, task_slug

__all__ = [
    "COOKIE_HEADER",
    "ContestIdentifier",
    "CookieJar",
    "Credentials",
    "Sample",
    "SampleBlock",
    "TaskEntry",
    "TaskSamples",
    "task_slug",
]

"""Service for fetching a contest's tasks and their samples."""

import asyncio

from loguru import logger

from atcoder_init.domain.models import ContestIdentifier, CookieJar, Sample, TaskEntry, TaskSamples
from atcoder_init.infrastructure.parsers import (
    BASE_URL,
    HTTPClientProtocol,
    SampleParser,
    SampleParserProtocol,
    TaskListParser,
    TaskListParserProtocol,
    URLParser,
)


class ContestService:
    """Service for scraping AtCoder contests."""

    def __init__(
        self,
        *,
        http_client: HTTPClientProtocol,
        task_list_parser: TaskListParserProtocol | None = None,
        sample_parser: SampleParserProtocol | None = None,
        base_url: str = BASE_URL,
    ):
        """Initialize service with dependencies."""
        self.http_client = http_client
        self.task_list_parser = task_list_parser or TaskListParser()
        self.sample_parser = sample_parser or SampleParser()
        self.base_url = base_url

    async def get_contest_samples(
        self, identifier: ContestIdentifier, jar: CookieJar
    ) -> TaskSamples:
        """Fetch the task list of a contest and then every task's samples."""
        tasks = await self.fetch_task_list(identifier, jar)
        return await self.fetch_samples(tasks, jar)

    async def fetch_task_list(
        self, identifier: ContestIdentifier, jar: CookieJar
    ) -> list[TaskEntry]:
        """Fetch and parse /contests/<id>/tasks."""
        url = URLParser.build_tasks_url(identifier, self.base_url)
        logger.info(f"Fetching task list of {identifier}")

        html = await self.http_client.get_text(url, headers=jar.as_headers())
        tasks = self.task_list_parser.parse(html)

        logger.info(f"Contest {identifier} has {len(tasks)} task(s)")
        return tasks

    async def fetch_samples(self, tasks: list[TaskEntry], jar: CookieJar) -> TaskSamples:
        """
        Fetch every task page concurrently and extract its samples.

        The first failure aborts the whole fetch; there is no partial result.
        """
        headers = jar.as_headers()
        logger.debug(f"Fetching {len(tasks)} task page(s) in parallel")

        fetches = [asyncio.ensure_future(self._fetch_task_samples(task, headers)) for task in tasks]
        try:
            results = await asyncio.gather(*fetches)
        except BaseException:
            pending = [fetch for fetch in fetches if not fetch.done()]
            for fetch in pending:
                fetch.cancel()
            # Collect every outcome so no failure goes unretrieved
            await asyncio.gather(*fetches, return_exceptions=True)
            logger.debug(f"Cancelled {len(pending)} pending task fetch(es)")
            raise

        samples: TaskSamples = {}
        for task, task_samples in zip(tasks, results):
            samples[task.name] = task_samples
        return samples

    async def _fetch_task_samples(self, task: TaskEntry, headers: dict[str, str]) -> list[Sample]:
        """Fetch a single task page and parse its samples."""
        url = URLParser.resolve(self.base_url, task.href)

        html = await self.http_client.get_text(url, headers=headers)
        samples = self.sample_parser.parse(html)

        logger.debug(f"Task {task.name}: {len(samples)} sample(s)")
        return samples

"""Parser for the contest task list page."""

from bs4 import BeautifulSoup
from loguru import logger

from atcoder_init.domain.models import TaskEntry


class TaskListParser:
    """Parser for extracting task entries from /contests/<id>/tasks."""

    def parse(self, html: str) -> list[TaskEntry]:
        """
        Extract (display name, href) pairs from every table body row.

        The first link of the first cell names the task; rows without one
        are skipped.
        """
        soup = BeautifulSoup(html, "lxml")

        tasks = []
        for row in soup.select("tbody tr"):
            cell = row.find("td")
            if not cell:
                continue

            link = cell.find("a")
            if not link:
                continue

            href = link.get("href")
            if not isinstance(href, str) or not href:
                logger.warning(f"Skipping task row without href: {row.get_text(strip=True)}")
                continue

            tasks.append(TaskEntry(name=link.get_text(strip=True), href=href))

        logger.debug(f"Found {len(tasks)} task(s) in task list")
        return tasks

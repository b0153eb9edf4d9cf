"""Unit tests for the task list fetch and sample fan-out."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from atcoder_init.domain.exceptions import HTTPStatusError
from atcoder_init.domain.models import ContestIdentifier, CookieJar, Sample, TaskEntry
from atcoder_init.services import ContestService

TASKS_HTML = """
<table><tbody>
<tr><td><a href="/contests/abc100/tasks/abc100_a">A</a></td><td>Happy</td></tr>
<tr><td><a href="/contests/abc100/tasks/abc100_b">B</a></td><td>Ringo</td></tr>
</tbody></table>
"""


def _task_html(pairs):
    parts = []
    for number, (given, expected) in enumerate(pairs, start=1):
        parts.append(f'<div class="part"><section><h3>入力例 {number}</h3><pre>{given}</pre></section></div>')
        parts.append(f'<div class="part"><section><h3>出力例 {number}</h3><pre>{expected}</pre></section></div>')
    return f'<div id="task-statement">{"".join(parts)}</div>'


PAGES = {
    "https://atcoder.jp/contests/abc100/tasks": TASKS_HTML,
    "https://atcoder.jp/contests/abc100/tasks/abc100_a": _task_html([("1 2\n", "3\n")]),
    "https://atcoder.jp/contests/abc100/tasks/abc100_b": _task_html([("5\n", "Yes\n"), ("6\n", "No\n")]),
}


@pytest.fixture
def http_client():
    client = MagicMock()

    async def get_text(url, headers=None):
        await asyncio.sleep(0)
        if url not in PAGES:
            raise HTTPStatusError(404, url)
        return PAGES[url]

    client.get_text = AsyncMock(side_effect=get_text)
    return client


@pytest.mark.asyncio
async def test_get_contest_samples(http_client):
    service = ContestService(http_client=http_client)
    jar = CookieJar(["REVEL_SESSION=abc"])

    samples = await service.get_contest_samples(ContestIdentifier("abc100"), jar)

    assert samples == {
        "A": [Sample("1 2\n", "3\n")],
        "B": [Sample("5\n", "Yes\n"), Sample("6\n", "No\n")],
    }
    for call in http_client.get_text.await_args_list:
        assert call.kwargs["headers"] == {"Cookie": "REVEL_SESSION=abc"}


@pytest.mark.asyncio
async def test_fetch_task_list(http_client):
    service = ContestService(http_client=http_client)

    tasks = await service.fetch_task_list(ContestIdentifier("abc100"), CookieJar())

    assert [task.name for task in tasks] == ["A", "B"]
    http_client.get_text.assert_awaited_once_with(
        "https://atcoder.jp/contests/abc100/tasks", headers={}
    )


@pytest.mark.asyncio
async def test_single_failure_collapses_fan_out(http_client):
    service = ContestService(http_client=http_client)
    tasks = [
        TaskEntry(name="A", href="/contests/abc100/tasks/abc100_a"),
        TaskEntry(name="Z", href="/contests/abc100/tasks/missing"),
    ]

    with pytest.raises(HTTPStatusError):
        await service.fetch_samples(tasks, CookieJar())


@pytest.mark.asyncio
async def test_failure_cancels_remaining_fetches():
    finished = []

    async def get_text(url, headers=None):
        if url.endswith("/fast"):
            raise HTTPStatusError(404, url)
        await asyncio.sleep(0.05)
        finished.append(url)
        raise HTTPStatusError(500, url)

    client = MagicMock()
    client.get_text = AsyncMock(side_effect=get_text)
    service = ContestService(http_client=client)
    tasks = [TaskEntry(name="A", href="/fast"), TaskEntry(name="B", href="/slow")]

    with pytest.raises(HTTPStatusError) as exc_info:
        await service.fetch_samples(tasks, CookieJar())
    await asyncio.sleep(0.1)

    assert exc_info.value.status_code == 404
    assert finished == []


@pytest.mark.asyncio
async def test_no_tasks_yields_empty_mapping(http_client):
    service = ContestService(http_client=http_client)

    assert await service.fetch_samples([], CookieJar()) == {}

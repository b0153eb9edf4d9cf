"""Unit tests for the contest task list parser."""

from atcoder_init.domain.models import TaskEntry
from atcoder_init.infrastructure.parsers import TaskListParser

TASKS_HTML = """
<html><body>
<table class="table">
  <thead><tr><th>Task</th><th>Task Name</th></tr></thead>
  <tbody>
    <tr>
      <td class="text-center no-break"><a href="/contests/abc100/tasks/abc100_a">A</a></td>
      <td><a href="/contests/abc100/tasks/abc100_a">Happy Birthday!</a></td>
    </tr>
    <tr>
      <td class="text-center no-break"><a href="/contests/abc100/tasks/abc100_b">B</a></td>
      <td><a href="/contests/abc100/tasks/abc100_b">Ringo's Favorite Numbers</a></td>
    </tr>
    <tr>
      <td>no link here</td>
      <td><a href="/contests/abc100/tasks/abc100_x">ignored</a></td>
    </tr>
  </tbody>
</table>
</body></html>
"""


def test_parse_task_rows():
    tasks = TaskListParser().parse(TASKS_HTML)

    assert tasks == [
        TaskEntry(name="A", href="/contests/abc100/tasks/abc100_a"),
        TaskEntry(name="B", href="/contests/abc100/tasks/abc100_b"),
    ]


def test_empty_page():
    assert TaskListParser().parse("<html></html>") == []


def test_slug_is_lowercased_name():
    assert TaskEntry(name="Ex", href="/t").slug == "ex"

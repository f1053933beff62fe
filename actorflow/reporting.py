"""Plain-text rendering of actor traces."""

from __future__ import annotations

from collections.abc import Iterable

from actorflow.actor import FAILED, PASSED, TraceEntry

_MARKS = {PASSED: "+", FAILED: "x"}


def _has_failed_child(entries: list[TraceEntry], index: int) -> bool:
    parent = entries[index]
    for entry in entries[index + 1:]:
        if entry.depth <= parent.depth:
            return False
        if entry.depth == parent.depth + 1 and entry.outcome == FAILED:
            return True
    return False


def format_trace(entries: Iterable[TraceEntry]) -> str:
    """
    Render trace entries as an indented report, one step per line.

    The failure message is printed once, under the innermost failed step.

    Example output::

        x Admin: log in as admin
            + Admin: open /
            x Admin: click on the login button
                TargetNotFound: Could not find the login button (...) within 5s
    """
    entries = list(entries)
    lines = []
    for index, entry in enumerate(entries):
        indent = "    " * entry.depth
        mark = _MARKS.get(entry.outcome, "?")
        lines.append(f"{indent}{mark} {entry.actor}: {entry.description}")
        if entry.outcome == FAILED and entry.error and not _has_failed_child(entries, index):
            lines.append(f"{indent}    {entry.error}")
    return "\n".join(lines)

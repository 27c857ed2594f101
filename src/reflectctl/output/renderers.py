"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from reflectctl.output.console import (
    create_console,
    get_output,
    style_for_status,
    style_for_type,
)

if TYPE_CHECKING:
    from rich.console import Console

    from reflectctl.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} - {msg}"

    # Feeds list one file path per line, snapshots one title per line
    reviews = result.data.get("reviews")
    if isinstance(reviews, list):
        return "\n".join(str(item.get("filePath", "")) for item in reviews)
    goals = result.data.get("goals")
    if isinstance(goals, list) and goals:
        return "\n".join(str(goal.get("title", "")) for goal in goals)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="reflect.ok")
    op = Text(f"  {result.op}", style="reflect.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="reflect.key")
    if key == "date":
        v = Text(str(value), style="reflect.date")
    elif key == "filePath":
        v = Text(str(value), style="reflect.path")
    elif key in ("title", "name"):
        v = Text(str(value), style="reflect.title")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_warnings(console: Console, result: ServiceResult) -> None:
    for warning in result.warnings:
        console.print(Text(f"  warning: {warning}", style="reflect.warning"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="reflect.error")
    op = Text(f"  {result.op}", style="reflect.op")
    sep = Text(" - ")
    console.print(label, op, sep, Text(msg))

    if verbose and err:
        console.print(Text(f"  code: {err.code} ({err.status})", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}", markup=False)


# ── Mutation renderer ─────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render create/update/save/clear results."""
    _status_line(console, result)
    for key in ("date", "name", "filePath", "hasDraft"):
        if key in result.data:
            _field(console, key, result.data[key])
    _render_warnings(console, result)


# ── Review renderers ──────────────────────────────────────────────────

_DAILY_LABELS: tuple[tuple[str, str], ...] = (
    ("energyLevel", "Energy level"),
    ("energyFactors", "Energy factors"),
    ("meaningfulWin", "Meaningful win"),
    ("frictionPoint", "Friction point"),
    ("frictionAction", "Friction action"),
    ("thingToLetGo", "Let go"),
    ("tomorrowPriority", "Tomorrow's priority"),
    ("notes", "Notes"),
    ("duration", "Minutes"),
)

_WEEKLY_LABELS: tuple[tuple[str, str], ...] = (
    ("weekNumber", "Week"),
    ("movedNeedle", "Moved the needle"),
    ("noiseDisguisedAsWork", "Noise disguised as work"),
    ("timeLeaks", "Time leaks"),
    ("strategicInsight", "Strategic insight"),
    ("adjustmentForNextWeek", "Adjustment"),
    ("notes", "Notes"),
    ("duration", "Minutes"),
)


def _render_review(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single parsed review as a panel of its answered fields."""
    d = result.data
    is_daily = result.op.startswith("get_daily")
    labels = _DAILY_LABELS if is_daily else _WEEKLY_LABELS

    lines: list[str] = []
    for key, label in labels:
        value = d.get(key)
        if value is None:
            continue
        text = str(value)
        if "\n" in text:
            lines.append(f"{label}:\n  " + text.replace("\n", "\n  "))
        else:
            lines.append(f"{label}: {text}")

    ratings = d.get("domainRatings")
    if ratings:
        rated = ", ".join(f"{k} {v}" for k, v in ratings.items() if v)
        if rated:
            lines.append(f"Life Map: {rated}")

    if verbose:
        lines.append(f"file: {d.get('filePath', '')}")

    kind = "daily" if is_daily else "weekly"
    title = f"{kind} review {d.get('date') or '?'}"
    console.print(
        Panel(
            Text("\n".join(lines) or "(empty)"),
            title=title,
            border_style=style_for_type(kind) or "dim",
            expand=False,
        )
    )


def _render_review_feed(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the aggregated feed as a table."""
    reviews = result.data.get("reviews", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Date", style="reflect.date", no_wrap=True)
    table.add_column("Type")
    table.add_column("Summary")
    if verbose:
        table.add_column("File", style="reflect.path")

    for item in reviews:
        kind = str(item.get("type", ""))
        if kind == "daily":
            summary = f"energy {item.get('energyLevel', 0)} | {item.get('tomorrowPriority', '')}"
        else:
            summary = f"week {item.get('weekNumber', 0)} | {item.get('movedNeedle', '')}"
        row: list[Any] = [
            str(item.get("date", "")),
            Text(kind, style=style_for_type(kind)),
            summary,
        ]
        if verbose:
            row.append(str(item.get("filePath", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(reviews))} reviews")


# ── Goal renderers ────────────────────────────────────────────────────


def _goal_table(goals: list[dict[str, Any]], *, numbered: bool) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    if numbered:
        table.add_column("#", justify="right")
    table.add_column("Title", style="reflect.title")
    table.add_column("Status")
    table.add_column("Description")

    for goal in goals:
        status = str(goal.get("status", ""))
        row: list[Any] = [
            str(goal.get("title", "")),
            Text(status, style=style_for_status(status)),
            str(goal.get("description", "")),
        ]
        if numbered:
            row.insert(0, str(goal.get("number", "")))
        table.add_row(*row)
    return table


def _render_snapshot(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    goals = result.data.get("goals", [])
    if not goals:
        console.print("No goals yet.")
        return
    console.print(_goal_table(goals, numbered=False))


def _render_goals(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a goals document: its status plus a table of goals."""
    d = result.data
    _status_line(console, result)
    _field(console, "status", d.get("status", ""))
    for key, value in (d.get("metadata") or {}).items():
        if key != "status":
            _field(console, key, value)
    goals = d.get("goals", [])
    if goals:
        console.print()
        console.print(_goal_table(goals, numbered=True))
    if verbose and d.get("content"):
        console.print()
        console.print(d["content"].rstrip("\n"), markup=False)


def _render_content(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a draft, framework or document: a panel around the raw markdown."""
    d = result.data
    title = d.get("title") or d.get("name") or result.op
    console.print(
        Panel(
            Text(str(d.get("content", "")).rstrip("\n")),
            title=str(title),
            border_style="dim",
            expand=False,
        )
    )
    if verbose and d.get("metadata"):
        for key, value in d["metadata"].items():
            _field(console, key, value)


# ── Life Map renderer ─────────────────────────────────────────────────


def _render_life_map(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render the six domains as a score table with a total out of 60."""
    d = result.data
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Domain", style="reflect.title")
    table.add_column("Score", justify="right")
    table.add_column("Assessment")
    for key, domain in (d.get("domains") or {}).items():
        score = domain.get("score", 0)
        table.add_row(
            key.capitalize(), str(score) if score else "-", Text(domain.get("assessment", ""))
        )
    console.print(table)
    console.print(f"\nTotal: {d.get('total', 0)} / 60")
    if verbose and d.get("filePath"):
        _field(console, "filePath", d["filePath"])


# ── Fallback ──────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    _render_warnings(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Reviews
    "get_daily_review": _render_review,
    "get_weekly_review": _render_review,
    "create_daily_review": _render_mutation,
    "create_weekly_review": _render_mutation,
    "update_daily_review": _render_mutation,
    "update_weekly_review": _render_mutation,
    "list_reviews": _render_review_feed,
    # Goals
    "goals_snapshot": _render_snapshot,
    "get_goals": _render_goals,
    "save_goals": _render_mutation,
    # Drafts
    "get_draft": _render_content,
    "save_draft": _render_mutation,
    "clear_draft": _render_mutation,
    # Frameworks
    "get_framework": _render_content,
    "save_framework": _render_mutation,
    # Life Map and single documents
    "get_life_map": _render_life_map,
    "update_life_map": _render_mutation,
    "get_document": _render_content,
    "save_document": _render_mutation,
}

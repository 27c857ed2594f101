"""Command group: the Life Map assessment table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from reflectctl.commands._base import ReflectGroup
from reflectctl.commands._input import payload_option, read_payload
from reflectctl.domain.types import LIFE_MAP_DOMAINS
from reflectctl.services.life_map import LifeMapService

if TYPE_CHECKING:
    from reflectctl.commands._context import AppContext

_LIFE_MAP_EXAMPLES = """\
  reflectctl life-map get
  reflectctl life-map set --score career=8 --score fun=4
  reflectctl life-map set --assess "health=Running again, sleep still short"
  reflectctl life-map set --from-json scores.json
  reflectctl --json life-map get"""


def _domain_pairs(items: tuple[str, ...], what: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for item in items:
        domain, sep, value = item.partition("=")
        domain = domain.strip().lower()
        if not sep or domain not in LIFE_MAP_DOMAINS:
            allowed = ", ".join(LIFE_MAP_DOMAINS)
            raise click.BadParameter(f"{item!r} is not DOMAIN={what} with DOMAIN one of: {allowed}")
        pairs.append((domain, value))
    return pairs


def _parse_scores(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[tuple[str, float]]:
    scores: list[tuple[str, float]] = []
    for domain, raw in _domain_pairs(value, "N"):
        try:
            score = float(raw)
        except ValueError:
            raise click.BadParameter(f"{raw!r} is not a number") from None
        scores.append((domain, int(score) if score.is_integer() else score))
    return scores


def _parse_assessments(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[tuple[str, str]]:
    return [(domain, text.strip()) for domain, text in _domain_pairs(value, "TEXT")]


def _merge_domains(payload: dict[str, Any], field: str, pairs: list[tuple[str, Any]]) -> None:
    if not pairs:
        return
    domains = payload.get("domains")
    merged: dict[str, Any] = dict(domains) if isinstance(domains, dict) else {}
    for domain, value in pairs:
        existing = merged.get(domain)
        merged[domain] = {**(existing if isinstance(existing, dict) else {}), field: value}
    payload["domains"] = merged


@click.group(name="life-map", cls=ReflectGroup, examples=_LIFE_MAP_EXAMPLES)
@click.pass_obj
def life_map(app: AppContext) -> None:
    """Life Map scores for career, relationships, health, meaning, finances, fun."""


@life_map.command()
@click.pass_obj
def get(app: AppContext) -> None:
    """Show the six domain scores and assessments."""
    app.emit(LifeMapService(app.workspace).get_life_map())


@life_map.command(
    name="set",
    epilog="Scores are truncated and clamped to 1-10. Unnamed domains are left as they are.",
)
@click.option(
    "--score",
    "scores",
    multiple=True,
    callback=_parse_scores,
    help="Domain score as DOMAIN=N (repeatable).",
)
@click.option(
    "--assess",
    "assessments",
    multiple=True,
    callback=_parse_assessments,
    help="Brief assessment as DOMAIN=TEXT (repeatable).",
)
@payload_option
@click.pass_obj
def set_scores(
    app: AppContext,
    scores: list[tuple[str, float]],
    assessments: list[tuple[str, str]],
    payload_file: Any,
) -> None:
    """Update some or all domains, keeping the rest of the document."""
    payload = read_payload(payload_file)
    _merge_domains(payload, "score", scores)
    _merge_domains(payload, "assessment", assessments)
    if "domains" not in payload:
        raise click.UsageError("Nothing to update: pass --score, --assess or --from-json.")
    app.emit(LifeMapService(app.workspace).update_life_map(payload))

"""Plain-text and JSON rendering of an AggregatedResult."""
from __future__ import annotations

import json
from typing import List, Sequence

from domain.entities import AggregatedResult

HEADERS = ("Team", "Champion", "Summoner", "Solo", "Flex")
FAILED = "?"


def table_rows(result: AggregatedResult) -> List[List[str]]:
    return [
        [
            row.team,
            row.champion_name,
            row.summoner_name,
            row.solo if not row.lookup_failed else FAILED,
            row.flex if not row.lookup_failed else FAILED,
        ]
        for row in result
    ]


def _border(widths: Sequence[int]) -> str:
    return "+" + "+".join("-" * (w + 2) for w in widths) + "+"


def _line(cells: Sequence[str], widths: Sequence[int]) -> str:
    return "|" + "|".join(f" {c:<{w}} " for c, w in zip(cells, widths)) + "|"


def render_table(result: AggregatedResult, summoner_name: str) -> str:
    """Left-aligned table, one row per participant, captioned with the queried name."""
    rows = table_rows(result)
    widths = [max(len(h), *(len(r[i]) for r in rows)) if rows else len(h) for i, h in enumerate(HEADERS)]
    out = [_border(widths), _line([h.upper() for h in HEADERS], widths), _border(widths)]
    out.extend(_line(r, widths) for r in rows)
    out.append(_border(widths))
    out.append(f"  Current match: {summoner_name}")
    if result.failures:
        names = ", ".join(f.summoner_name for f in result.failures)
        out.append(f"  Rank lookup failed for: {names}")
    return "\n".join(out)


def render_json(result: AggregatedResult, summoner_name: str) -> str:
    payload = {"summoner": summoner_name, **result.to_dict()}
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)

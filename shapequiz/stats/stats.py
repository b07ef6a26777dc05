from __future__ import annotations

"""Human-readable formatting of end-of-session results."""

from typing import Dict, Mapping

from ..results.schema import TypeTally


def format_per_type(per_type: Mapping[str, TypeTally]) -> str:
    lines = []
    for type_id in sorted(per_type):
        t = per_type[type_id]
        line = f"  {type_id}: {t.correct}/{t.asked} correct, {t.points} pts"
        if t.timeouts:
            line += f" ({t.timeouts} timed out)"
        lines.append(line)
    return "\n".join(lines)


def format_summary(summary: Dict) -> str:
    """Return a human-readable summary of a finished session."""
    lines = [
        f"Score: {summary['score']}",
        f"Correct: {summary['correct']}/{summary['total']}",
        f"Incorrect: {summary['incorrect']}",
        f"Accuracy: {summary['accuracy']}%",
        str(summary.get("message", "")),
    ]
    per_type = summary.get("per_type") or {}
    if per_type:
        lines.append("By question type:")
        lines.append(format_per_type(per_type))
    return "\n".join(lines)

from __future__ import annotations

"""Plain-text rendering of questions and outcomes for the terminal."""

import string
from typing import List, Sequence

from ..catalog.attributes import AttributeCatalog, AttributeKind
from ..questions.base_question import Question, ShapeInstance

_LABELS = string.ascii_lowercase


def describe_figure(figure: ShapeInstance, catalog: AttributeCatalog) -> str:
    """e.g. 'big red circle'."""
    size = catalog.display_name(AttributeKind.SIZE, figure.size).lower()
    return f"{size} {figure.color} {figure.shape}"


def render_question(question: Question, catalog: AttributeCatalog, index: int, total: int) -> str:
    lines: List[str] = [f"Q{index}/{total}: {question.prompt}"]
    for i, figure in enumerate(question.display_set):
        marker = "*" if question.highlight_index == i else " "
        lines.append(f"  {marker} {describe_figure(figure, catalog)}")
    lines.append("Options:")
    for label, option in zip(_LABELS, question.options):
        lines.append(f"  {label}) {option}")
    return "\n".join(lines)


def resolve_choice(raw: str, options: Sequence[str]) -> str:
    """Map typed input to an option: its letter label or its text.

    Anything else is returned stripped and will be graded as wrong.
    """
    text = raw.strip()
    for option in options:
        if option.lower() == text.lower():
            return option
    if len(text) == 1 and text.lower() in _LABELS[: len(options)]:
        return options[_LABELS.index(text.lower())]
    return text

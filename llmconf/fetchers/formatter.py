# -*- coding: utf-8 -*-
"""Numbered, paginated display of a model map."""

from __future__ import annotations

from typing import List, Mapping, NamedTuple, Optional, Sequence, Tuple

from ..constant import MODEL_PAGE_SIZE
from ..providers.models import ModelInfo

# (substrings, rank); lower ranks are listed first.
_FAMILY_PRIORITY: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("claude-sonnet-4", "claude-4", "gpt-4o"), 1),
    (("claude-3.7", "claude-3-7"), 2),
    (("claude-3.5", "claude-3-5"), 3),
    (("claude",), 4),
    (("gpt-4",), 5),
    (("gpt-3.5",), 6),
    (("gpt",), 7),
    (("llama-3.3", "llama3.3"), 8),
    (("llama-3", "llama3"), 9),
    (("mixtral",), 10),
    (("qwen",), 11),
    (("deepseek",), 12),
)
_UNRANKED = 100


class ModelOption(NamedTuple):
    number: int
    model_id: str
    display_text: str


def model_priority(model_id: str) -> int:
    lowered = model_id.lower()
    for needles, rank in _FAMILY_PRIORITY:
        if any(needle in lowered for needle in needles):
            return rank
    return _UNRANKED


def format_context_window(context_window: int) -> str:
    if context_window <= 0:
        return ""
    if context_window >= 1000:
        return f"({context_window // 1000}k context)"
    return f"({context_window} context)"


def format_model_option(model_id: str, info: ModelInfo) -> str:
    """``"gpt-4o (128k context)"``; just the id when the window is unknown."""
    context = format_context_window(info.context_window)
    return f"{model_id} {context}" if context else model_id


def format_model_list(models: Mapping[str, ModelInfo]) -> List[ModelOption]:
    """Sort by family rank, then larger window, then id; number from 1."""
    ordered = sorted(
        models.items(),
        key=lambda item: (
            model_priority(item[0]),
            -item[1].context_window,
            item[0],
        ),
    )
    return [
        ModelOption(i, model_id, format_model_option(model_id, info))
        for i, (model_id, info) in enumerate(ordered, start=1)
    ]


def paginate_models(
    options: Sequence[ModelOption],
    page_size: int = MODEL_PAGE_SIZE,
) -> List[List[ModelOption]]:
    if page_size <= 0:
        page_size = MODEL_PAGE_SIZE
    return [
        list(options[i : i + page_size])
        for i in range(0, len(options), page_size)
    ]


def format_model_page(
    page: Sequence[ModelOption],
    page_num: int,
    total_pages: int,
) -> str:
    lines = []
    if total_pages > 1:
        lines.append(f"Available models (page {page_num} of {total_pages}):")
    else:
        lines.append("Available models:")
    lines.extend(f"{opt.number}. {opt.display_text}" for opt in page)
    if total_pages > 1 and page_num < total_pages:
        lines.append("")
        lines.append(
            "Type 'next' to see more models, or select by number/ID",
        )
    return "\n".join(lines)


def find_model_by_number_or_id(
    text: str,
    options: Sequence[ModelOption],
) -> Optional[str]:
    """Resolve a display number, an exact id, or a case-insensitive id."""
    text = text.strip()
    if text.isdigit():
        number = int(text)
        for opt in options:
            if opt.number == number:
                return opt.model_id
        return None
    for opt in options:
        if opt.model_id == text:
            return opt.model_id
    lowered = text.lower()
    for opt in options:
        if opt.model_id.lower() == lowered:
            return opt.model_id
    return None

"""Recover a JSON plan from free-form model output.

Strategies run in order and the first one that finds a candidate wins:
a ```json fenced block, then the widest brace-delimited span, then the
whole text. The chosen candidate must parse; there is no fallback to a
later strategy once one has matched.
"""

import json
import re
from typing import Callable, List, Optional

from ..errors import PlanExtractionError

_FENCED_JSON = re.compile(r"```json\s*([\s\S]*?)\s*```")
_BRACE_SPAN = re.compile(r"\{[\s\S]*\}")


def fenced_json_candidate(text: str) -> Optional[str]:
    match = _FENCED_JSON.search(text)
    return match.group(1) if match else None


def brace_span_candidate(text: str) -> Optional[str]:
    match = _BRACE_SPAN.search(text)
    return match.group(0) if match else None


def whole_text_candidate(text: str) -> Optional[str]:
    return text


STRATEGIES: List[Callable[[str], Optional[str]]] = [
    fenced_json_candidate,
    brace_span_candidate,
    whole_text_candidate,
]


def extract_plan(raw_text: str) -> dict:
    """
    Parse a plan object out of generated text.

    Raises:
        PlanExtractionError: If the selected candidate is not a JSON object
    """
    raw_text = raw_text or ""
    candidate = raw_text
    for strategy in STRATEGIES:
        found = strategy(raw_text)
        if found is not None:
            candidate = found
            break

    try:
        plan = json.loads(candidate)
    except ValueError as e:
        raise PlanExtractionError(f"Failed to parse plan: {e}", raw_text=raw_text) from e

    if not isinstance(plan, dict):
        raise PlanExtractionError(
            f"Failed to parse plan: expected a JSON object, got {type(plan).__name__}",
            raw_text=raw_text,
        )
    return plan

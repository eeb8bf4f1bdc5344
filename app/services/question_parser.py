import json
import re
from dataclasses import dataclass, field
from typing import Any, List, Union

ORDINAL_PREFIX = re.compile(r"^\d+\.?\s*")
LINE_BREAKS = re.compile(r"\n+")


@dataclass(frozen=True)
class StructuredQuestions:
    questions: List[str] = field(default_factory=list)
    strategy: str = "structured"


@dataclass(frozen=True)
class HeuristicQuestions:
    questions: List[str] = field(default_factory=list)
    strategy: str = "heuristic"


ParsedQuestions = Union[StructuredQuestions, HeuristicQuestions]


def strip_json_fences(text: str) -> str:
    stripped = text.strip()
    if stripped.startswith("```"):
        lines = stripped.splitlines()
        if len(lines) >= 3 and lines[-1].strip() == "```":
            return "\n".join(lines[1:-1]).strip()
    return stripped


def _render(item: Any) -> str:
    if item is None:
        return ""
    if isinstance(item, str):
        return item.strip()
    return json.dumps(item, ensure_ascii=False)


def _decode_array(text: str) -> List[str] | None:
    try:
        data = json.loads(text)
    except (ValueError, RecursionError):
        return None
    if not isinstance(data, list):
        return None
    return [q for q in (_render(item) for item in data) if q]


def split_lines(text: str) -> List[str]:
    questions = (ORDINAL_PREFIX.sub("", line.strip()).strip() for line in LINE_BREAKS.split(text))
    return [q for q in questions if q]


def parse_questions(text: str | None) -> ParsedQuestions:
    """Turn the model's reply into a list of questions.

    A JSON array wins; anything else is read one question per line with
    leading ordinals removed.
    """
    cleaned = strip_json_fences(text or "")
    structured = _decode_array(cleaned)
    if structured is not None:
        return StructuredQuestions(structured)
    return HeuristicQuestions(split_lines(cleaned))

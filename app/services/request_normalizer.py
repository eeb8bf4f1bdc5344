"""Flatten the interview-configuration payloads the voice assistant sends.

The same fields can arrive at the top level of the body, under
``variableValues``, under ``message.assistant.variableValues`` or inside the
arguments of a tool call. Each shape has one extractor; extractors are tried in
precedence order and the first one that yields a value wins, per field.
"""
import json
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from app.schemas.interview import InterviewFields

Extractor = Callable[[Mapping[str, Any]], Mapping[str, Any]]

FIELD_KEYS: Dict[str, Tuple[str, ...]] = {
    "role": ("role",),
    "interview_type": ("type",),
    "level": ("level",),
    "techstack": ("techstack",),
    "amount": ("amount",),
    "user_id": ("userid", "userId", "user_id"),
    "user_name": ("userName", "username", "user_name"),
}

_MISSING = object()


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _first_tool_call(message: Mapping[str, Any]) -> Mapping[str, Any]:
    for key in ("toolCalls", "toolCallList"):
        calls = message.get(key)
        if isinstance(calls, list) and calls:
            return _as_mapping(calls[0])
    return {}


def tool_call_arguments(body: Mapping[str, Any]) -> Mapping[str, Any]:
    message = _as_mapping(body.get("message"))
    function = _as_mapping(_first_tool_call(message).get("function"))
    arguments = function.get("arguments")
    if isinstance(arguments, str):
        try:
            arguments = json.loads(arguments)
        except json.JSONDecodeError:
            return {}
    return _as_mapping(arguments)


def assistant_variable_values(body: Mapping[str, Any]) -> Mapping[str, Any]:
    message = _as_mapping(body.get("message"))
    assistant = _as_mapping(message.get("assistant"))
    return _as_mapping(assistant.get("variableValues"))


def variable_values(body: Mapping[str, Any]) -> Mapping[str, Any]:
    return _as_mapping(body.get("variableValues"))


def top_level(body: Mapping[str, Any]) -> Mapping[str, Any]:
    return body


EXTRACTORS: Tuple[Extractor, ...] = (
    tool_call_arguments,
    assistant_variable_values,
    variable_values,
    top_level,
)


def _as_text(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return None


def _lookup(source: Mapping[str, Any], keys: Tuple[str, ...], convert: Callable[[Any], Any]) -> Any:
    for key in keys:
        value = source.get(key)
        if value is None:
            continue
        converted = convert(value)
        if converted is not None:
            return converted
    return _MISSING


def split_techstack(value: Any) -> List[str]:
    if not isinstance(value, str):
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def normalize_request(body: Any, extractors: Tuple[Extractor, ...] = EXTRACTORS) -> InterviewFields:
    body = _as_mapping(body)
    sources = [extract(body) for extract in extractors]

    resolved: Dict[str, Any] = {}
    for field, keys in FIELD_KEYS.items():
        convert = split_techstack if field == "techstack" else _as_text
        for source in sources:
            value = _lookup(source, keys, convert)
            if value is not _MISSING:
                resolved[field] = value
                break

    return InterviewFields(**resolved)

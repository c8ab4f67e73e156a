"""
Compact JSON rendering of payloads for log lines.
"""

import json
from dataclasses import asdict, is_dataclass
from typing import Any

_MAX_LOG_LENGTH = 2000


def to_json(obj: Any, max_length: int | None = _MAX_LOG_LENGTH) -> str:
    """
    Render obj as JSON, cut to max_length characters.

    Dataclasses and objects with to_dict() are expanded; anything else
    json cannot handle is rendered with str().
    """
    text = json.dumps(obj, default=_fallback, separators=(",", ":"))
    if max_length is not None and len(text) > max_length:
        return f"{text[:max_length]}...(+{len(text) - max_length} chars)"
    return text


def _fallback(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    return str(obj)

"""Turn free-form completion text into one JSON object.

The completion may wrap the object in markdown fences or surround it with prose.
The first balanced-brace substring is decoded; braces inside JSON strings are
ignored while scanning. Callers get a ParseResult and never an exception, so the
AI/heuristic fallback boundary stays in one place.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ParseResult:
    value: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    raw: str = field(default="", repr=False)

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None

    @classmethod
    def success(cls, value: Dict[str, Any], raw: str = "") -> "ParseResult":
        return cls(value=value, raw=raw)

    @classmethod
    def failure(cls, error: str, raw: str = "") -> "ParseResult":
        return cls(error=error, raw=raw)


def find_balanced_object(text: str) -> Optional[str]:
    """Return the first {...} substring whose braces balance, or None."""
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start : i + 1]
        # Unbalanced from this brace; try the next opening brace
        start = text.find("{", start + 1)
    return None


def extract_json_object(text: Optional[str]) -> ParseResult:
    """Parse the first balanced JSON object in a completion response."""
    if not text or not text.strip():
        return ParseResult.failure("Empty AI response")
    candidate = find_balanced_object(text)
    if candidate is None:
        return ParseResult.failure("No JSON object found in AI response", raw=text)
    try:
        value = json.loads(candidate)
    except json.JSONDecodeError as e:
        return ParseResult.failure(f"Invalid JSON in AI response: {e}", raw=candidate)
    if not isinstance(value, dict):
        return ParseResult.failure("AI response JSON is not an object", raw=candidate)
    return ParseResult.success(value, raw=candidate)

"""Structured Output Parsing: turns raw Gemini text into the `series` list.

Invariants:
    - Steps run in order: strip fences/whitespace, slice first "{" to last "}",
      json.loads (strict: NaN and Infinity are rejected), require an object
      with a list `series`
    - Any failed step raises ParseError; the returned list is never modified

Design Decisions:
    - Pure function raising ParseError: the service owns the fallback decision
"""

import json
import re

from painel.core.errors import ParseError

# Leading ```lang fence (with optional newline) or trailing ``` fence
_FENCE_RE = re.compile(r"^```[a-zA-Z]*\n?|```\Z")


def _reject_constant(token: str):
    raise ValueError(f"non-JSON constant {token}")


def strip_code_fences(text: str | None) -> str:
    """Remove surrounding whitespace and markdown code-fence markers."""
    cleaned = (text or "").strip()
    return _FENCE_RE.sub("", cleaned).strip()


def parse_series_payload(text: str | None) -> list:
    """Extract the `series` list from model output or raise ParseError."""
    cleaned = strip_code_fences(text)
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end == -1:
        raise ParseError("no JSON object found")

    try:
        parsed = json.loads(
            cleaned[start:end + 1], parse_constant=_reject_constant,
        )
    except ValueError as e:
        raise ParseError(f"JSON parse error: {e}") from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("series"), list):
        raise ParseError("missing series array")
    return parsed["series"]

# /app/services/llm_output.py

"""Helpers for coaxing structured data out of free-form model output."""

import json
import re
from typing import Any, Optional

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(raw: str) -> str:
    """Removes a Markdown code fence (``` or ```json) wrapped around the text."""
    text = (raw or "").strip()
    text = _LEADING_FENCE.sub("", text)
    text = _TRAILING_FENCE.sub("", text)
    return text.strip()


def extract_json_object(raw: str) -> str:
    """
    Returns the substring from the first '{' to the last '}', or the input
    unchanged when there is no such span. Tolerates prose around the JSON.
    """
    start_index = raw.find("{")
    end_index = raw.rfind("}")
    if start_index != -1 and end_index > start_index:
        return raw[start_index:end_index + 1]
    return raw


def parse_json_array(raw: str) -> Optional[list]:
    """Parses a fenced-or-bare JSON array. Returns None if it is not one."""
    try:
        parsed: Any = json.loads(strip_code_fences(raw))
    except (json.JSONDecodeError, TypeError):
        return None
    return parsed if isinstance(parsed, list) else None

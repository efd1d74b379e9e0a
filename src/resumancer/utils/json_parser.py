"""Pull a JSON payload out of a model reply that may carry prose or fences."""

from __future__ import annotations

import json


def extract_json(text: str) -> dict | list:
    """Parse the reply as JSON, falling back to the fenced or embedded object.

    Broken or truncated JSON is not repaired; bare arrays inside prose are
    left to ``extract_json_array``.
    """
    text = (text or "").strip()
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    for candidate in (_strip_code_fences(text), text):
        found = _slice_between(candidate, "{", "}")
        if found is not None:
            return found

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def extract_json_array(text: str) -> list:
    """Extract a bare JSON array, ignoring any wrapping object."""
    text = (text or "").strip()
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        parsed = _slice_between(_strip_code_fences(text), "[", "]")
    if not isinstance(parsed, list):
        raise ValueError(f"Could not extract JSON array from text: {text[:200]}...")
    return parsed


def _strip_code_fences(text: str) -> str:
    lines = text.split("\n")
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]
    return "\n".join(lines).strip()


def _slice_between(text: str, opener: str, closer: str):
    """Parse text[first opener : last closer], or None if that is not JSON."""
    start = text.find(opener)
    end = text.rfind(closer)
    if start == -1 or end <= start:
        return None
    try:
        return json.loads(text[start : end + 1])
    except json.JSONDecodeError:
        return None

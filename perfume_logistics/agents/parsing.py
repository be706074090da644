"""Extraction of JSON objects from agent text replies."""
import json
from typing import Any


def strip_code_fence(text: str) -> str:
    """Remove a surrounding markdown code block (```json ... ```) if present."""
    stripped = text.strip()
    if not stripped.startswith("```"):
        return stripped

    lines = stripped.split("\n")
    if lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)


def extract_json(text: str) -> Any:
    """Parse the JSON object contained in ``text``.

    Tries the whole (fence-stripped) text first, then the outermost
    ``{...}`` span.

    Raises:
        ValueError: If no JSON object can be parsed.
    """
    candidate = strip_code_fence(text)
    try:
        return json.loads(candidate)
    except json.JSONDecodeError:
        pass

    start = candidate.find("{")
    end = candidate.rfind("}") + 1
    if start != -1 and end > start:
        try:
            return json.loads(candidate[start:end])
        except json.JSONDecodeError as e:
            raise ValueError(f"Agent reply is not valid JSON: {e}") from e

    raise ValueError("Agent reply contains no JSON object")

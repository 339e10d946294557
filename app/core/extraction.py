"""Recovering a list of questions from free-form model output."""

import json
from typing import Any, List


class ExtractionError(ValueError):
    pass


def _loads_list(text: Any) -> List[Any] | None:
    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, TypeError, RecursionError):
        return None
    return parsed if isinstance(parsed, list) else None


def extract_json_array(text: Any) -> List[Any]:
    """
    Parse ``text`` as a JSON array.

    Falls back to the substring between the first ``[`` and the last ``]``
    so that prose or code fences around the array are tolerated.
    """
    if not isinstance(text, str):
        raise ExtractionError(f"Expected text output, got {type(text).__name__}.")

    parsed = _loads_list(text)
    if parsed is not None:
        return parsed

    start = text.find("[")
    end = text.rfind("]")
    if start != -1 and end > start:
        parsed = _loads_list(text[start:end + 1])
        if parsed is not None:
            return parsed

    raise ExtractionError("Unable to parse assistant output into JSON array of strings.")


def extract_question_list(text: Any) -> List[str]:
    questions = extract_json_array(text)
    if not all(isinstance(question, str) for question in questions):
        raise ExtractionError("Parsed array items are not all strings.")
    return questions

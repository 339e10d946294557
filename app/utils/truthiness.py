from typing import Any


def is_truthy(value: Any) -> bool:
    """Truthiness of a decoded JSON value as the web client sees it: empty arrays and objects count as set."""
    if isinstance(value, (list, dict)):
        return True
    return bool(value)

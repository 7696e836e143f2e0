"""Request payload validation and normalization helpers."""
import math
import re

from portfolio.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_valid_email(email) -> bool:
    return isinstance(email, str) and bool(EMAIL_PATTERN.match(email))


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: dict, fields, message: str):
    """Raise ValidationError when any of ``fields`` is missing or blank."""
    if any(is_blank(data.get(field)) for field in fields):
        raise ValidationError(message)


def get_json_payload(request) -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def clamp(value, lower: int, upper=None, field: str = "value") -> int:
    """
    Coerce ``value`` to an int and clamp it into [lower, upper].

    Out-of-range numbers are corrected silently, infinities included. Non-numeric
    input, NaN, and +inf with no upper bound are errors.
    """
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be a number")
    if math.isnan(number):
        raise ValidationError(f"{field} must be a number")
    if number == math.inf and upper is None:
        raise ValidationError(f"{field} is too large")

    number = max(lower, number)
    if upper is not None:
        number = min(upper, number)
    return int(number)


def split_list(value, separator: str) -> list:
    """
    Normalize a list-typed field.

    Accepts an already split list or a delimited string; entries are trimmed
    and empty ones dropped. Anything else becomes an empty list.
    """
    if isinstance(value, (list, tuple)):
        items = [str(item) for item in value if item is not None]
    elif isinstance(value, str):
        items = value.split(separator)
    else:
        return []
    return [item.strip() for item in items if item.strip()]

"""Field validation for product payloads.

Checks a candidate payload against the catalog's type/shape rules and
reports every violated rule, in a fixed field order, rather than stopping
at the first one. Unknown fields are ignored.
"""

import math
from typing import Any

from ..models import ValidationResult

STRING_FIELDS = ("name", "description", "category")


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value.strip() != ""


def _is_finite_number(value: Any) -> bool:
    # bool is a subclass of int and must not count as a price
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large for a float
        return False


def _is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


_RULES = (
    ("name", _is_non_empty_string, "name must be a non-empty string"),
    ("description", _is_non_empty_string, "description must be a non-empty string"),
    ("price", _is_finite_number, "price must be a finite number"),
    ("category", _is_non_empty_string, "category must be a non-empty string"),
    ("inStock", _is_boolean, "inStock must be a boolean"),
)


def validate_product_payload(payload: Any, require_all: bool = True) -> ValidationResult:
    """Validate a product payload.

    Args:
        payload: Decoded JSON body. Anything other than a dict is treated
            as an empty object.
        require_all: When True every field is checked; when False only the
            fields present in the payload are.

    Returns:
        ValidationResult with the ordered list of field error messages.
    """
    if not isinstance(payload, dict):
        payload = {}

    errors = []
    for field_name, check, message in _RULES:
        if not require_all and field_name not in payload:
            continue
        if not check(payload.get(field_name)):
            errors.append(message)

    return ValidationResult(valid=not errors, errors=errors)

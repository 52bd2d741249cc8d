from typing import Any, List

REQUIRED_LIST_FIELDS = ["a", "b"]
OPTIONAL_BOOL_FIELDS = ["case_sensitive"]


class ValidationError(ValueError):
    """Raised by validate_pair_strict when a comparison payload is malformed."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


def _is_str_list(v: Any) -> bool:
    return isinstance(v, list) and all(isinstance(item, str) for item in v)


def validate_pair(data: Any) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Empty label lists are valid; the similarity of two empty lists is 0.
    """
    if not isinstance(data, dict):
        return ["Payload must be a JSON object"]

    errors: List[str] = []

    for f in REQUIRED_LIST_FIELDS:
        if f not in data:
            errors.append(f"Missing required field: {f}")
        elif not isinstance(data[f], list):
            errors.append(f"Field '{f}' must be a list of strings")
        elif not _is_str_list(data[f]):
            bad = [i for i, item in enumerate(data[f]) if not isinstance(item, str)]
            errors.append(f"Field '{f}' has non-string entries at positions {bad}")

    # bool is checked exactly so that 0/1 are rejected
    for f in OPTIONAL_BOOL_FIELDS:
        if f in data and type(data[f]) is not bool:
            errors.append(f"Field '{f}' must be a boolean if provided")

    return errors


def validate_pair_strict(data: Any) -> None:
    errors = validate_pair(data)
    if errors:
        raise ValidationError(errors)

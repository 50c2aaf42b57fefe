"""
Request validation.

Rules are declared per DTO in ``RULES`` and interpreted by ``validate``.
Each rule is a ``(check, message)`` pair applied to one field value.
"""
from typing import Any, Callable, Dict, List, Tuple

from pydantic import BaseModel

from category_api.repositories.tables import CATEGORY_NAME_MAX_LENGTH
from category_api.schemas import CategoryCreateRequest, CategoryUpdateRequest
from category_api.utils.exceptions import ValidationError

Rule = Tuple[Callable[[Any], bool], str]


def required() -> Rule:
    return (lambda value: value is not None and str(value).strip() != "", "is required")


def max_length(limit: int) -> Rule:
    return (lambda value: value is None or len(value) <= limit, f"must be at most {limit} characters")


def encodable_text() -> Rule:
    return (lambda value: value is None or _encodes_as_utf8(value), "must be valid UTF-8 text")


def _encodes_as_utf8(value: str) -> bool:
    # lone surrogates such as "\ud800" survive JSON decoding but not storage
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


_CATEGORY_NAME_RULES: List[Rule] = [required(), encodable_text(), max_length(CATEGORY_NAME_MAX_LENGTH)]

RULES: Dict[type, Dict[str, List[Rule]]] = {
    CategoryCreateRequest: {"name": _CATEGORY_NAME_RULES},
    CategoryUpdateRequest: {"name": _CATEGORY_NAME_RULES},
}


def validate(request: BaseModel) -> None:
    """Raise ``ValidationError`` listing every broken rule of ``request``."""
    field_rules = RULES.get(type(request))
    if field_rules is None:
        raise TypeError(f"No validation rules registered for {type(request).__name__}")

    errors: Dict[str, List[str]] = {}
    for field, rules in field_rules.items():
        value = getattr(request, field, None)
        for check, message in rules:
            if not check(value):
                errors.setdefault(field, []).append(message)
                # later rules assume the earlier ones passed
                break

    if errors:
        raise ValidationError(errors)

from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_feature_codes(codes: Iterable[str] | None, field_name: str = "codes") -> frozenset[str]:
    """Normalize caller-supplied feature codes into a set.

    Blank entries are dropped; anything that is not a string is rejected.
    """

    if codes is None:
        raise ValidationError(f"{field_name} is required")
    if isinstance(codes, str):
        raise ValidationError(f"{field_name} must be a list of feature codes")

    out: set[str] = set()
    for code in codes:
        if not isinstance(code, str):
            raise ValidationError(f"{field_name} must contain only strings")
        code = code.strip()
        if code:
            out.add(code)
    if not out:
        raise ValidationError(f"{field_name} must contain at least one feature code")
    return frozenset(out)

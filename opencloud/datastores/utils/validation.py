"""Argument checks shared by the public handles.

All checks raise ValidationError synchronously, before any request is made.
"""

from __future__ import annotations

import math
from typing import Any

from ..config import MAX_PAGE_SIZE
from ..core.exceptions import ValidationError


def must_be_string(what: str, value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{what} must be a string")


def must_be_integer(what: str, value: Any) -> None:
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{what} must be an integer")


def must_be_number(what: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{what} must be a number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{what} must be a finite number")


def check_page_size(page_size: Any) -> None:
    """Validate a listing page size (1..MAX_PAGE_SIZE)."""
    must_be_integer("PageSize", page_size)
    if page_size > MAX_PAGE_SIZE:
        raise ValidationError(f"PageSize cannot be greater than {MAX_PAGE_SIZE}")
    if page_size < 1:
        raise ValidationError("PageSize must be positive")

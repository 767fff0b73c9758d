"""Overflow-checked integer primitives.

Python integers never wrap, so the checks are against an explicit signed
64-bit range. Any result outside it raises ``IntegerOverflowError`` instead of
being returned.
"""

from typing import Final

from order_submission_api.core.domain.exceptions import IntegerOverflowError

INT64_MAX: Final[int] = 2**63 - 1
INT64_MIN: Final[int] = -(2**63)


def _ensure_in_range(result: int, operation: str, left: int, right: int) -> int:
    if not INT64_MIN <= result <= INT64_MAX:
        raise IntegerOverflowError(context={"operation": operation, "operands": [left, right]})
    return result


def checked_mul(left: int, right: int) -> int:
    return _ensure_in_range(left * right, "mul", left, right)


def checked_add(left: int, right: int) -> int:
    return _ensure_in_range(left + right, "add", left, right)

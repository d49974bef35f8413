"""Error type and small checking helpers shared across the package."""

from __future__ import annotations

from collections.abc import Iterable

STATUS_SUCCESS = 0


class InfiniError(RuntimeError):
    """Raised when an internal check or an operator call fails."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.info = message

    def __str__(self) -> str:
        return self.info


def ensure(condition: object, info: str = "") -> None:
    """Raise InfiniError carrying *info* unless *condition* is truthy."""
    if not condition:
        raise InfiniError(f"Assertion failed: {info}")


def check_status(status: int, call: str) -> None:
    """Raise InfiniError if *status* from the operator *call* is not success."""
    if status != STATUS_SUCCESS:
        raise InfiniError(f"operators error ({call}): {status}")


def vec_to_string(values: Iterable[object]) -> str:
    """Render a sequence as ``[a,b,c]`` with no spaces."""
    return "[" + ",".join(str(value) for value in values) + "]"
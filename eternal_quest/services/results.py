"""
Mapping from exceptions to typed failure results.
"""
from typing import Any, List, Optional

from pydantic import ValidationError

from eternal_quest.exceptions import (
    EternalQuestException,
    ValidationException,
    GoalFileNotFoundException,
    GoalFileIOException,
    UnknownVariantException,
)
from eternal_quest.schemas import ErrorKind, OperationResult

_ERROR_KINDS = [
    (ValidationException, ErrorKind.VALIDATION_ERROR),
    (GoalFileNotFoundException, ErrorKind.NOT_FOUND),
    (GoalFileIOException, ErrorKind.IO_FAILURE),
    (UnknownVariantException, ErrorKind.UNKNOWN_VARIANT),
]


def error_kind_for(exc: Exception) -> ErrorKind:
    if isinstance(exc, ValidationError):
        return ErrorKind.VALIDATION_ERROR
    for exc_type, kind in _ERROR_KINDS:
        if isinstance(exc, exc_type):
            return kind
    # Any other library exception is a storage failure
    return ErrorKind.IO_FAILURE


def describe(exc: Exception) -> str:
    """One-line message; pydantic errors are flattened to 'field: msg' pairs"""
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
    return str(exc)


def failure_from(
    exc: Exception,
    value: Any = None,
    diagnostics: Optional[List[str]] = None
) -> OperationResult:
    return OperationResult.failure(
        error_kind_for(exc), describe(exc), value=value, diagnostics=diagnostics
    )


# Exceptions a service operation converts into a failed result
HANDLED_EXCEPTIONS = (EternalQuestException, ValidationError)

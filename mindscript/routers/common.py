"""Helpers shared by the routers: presence checks, soft failures and store errors."""
from contextlib import contextmanager
from typing import Any, Dict, Iterator

from mindscript.errors import AppError, InternalError, NotFoundError, ValidationError
from mindscript.services.repository import WriteResult
from mindscript.utils.logger import api_logger


def require(message: str, *values: Any) -> None:
    """Raise ValidationError with ``message`` unless every value is present and non-empty."""
    for value in values:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def require_affected(result: WriteResult, message: str, **payload: Any) -> WriteResult:
    """Turn a zero-rows-affected write into a NotFoundError."""
    if not result.ok:
        raise NotFoundError(message, payload=payload)
    return result


def removed_summary(result: WriteResult) -> Dict[str, int]:
    return {"affectedRows": result.affected}


@contextmanager
def store_errors(message: str, **context: Any) -> Iterator[None]:
    """Report unexpected failures inside the block as an InternalError with ``message``."""
    try:
        yield
    except AppError:
        raise
    except Exception as e:
        api_logger.exception(message, error=str(e), **context)
        raise InternalError(message, detail=str(e)) from e

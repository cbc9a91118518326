"""
Exceptions raised by the entity managers.

KanbanError (base)
├── NotFoundError (lookup matched no row)
├── ConstraintViolationError (unique or foreign key violation)
├── InvariantViolationError (application check failed, nothing written)
├── AggregateLoadError (a related collection could not be loaded)
└── StoreError (any other database failure)

Messages accumulate the chain of operations that propagated the error, e.g.
``BoardModel.get_by_id() -> BoardModel._load_everything() -> ...``.
"""
from contextlib import contextmanager
from typing import Iterator, Optional
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
class KanbanError(Exception):
    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
    def __str__(self) -> str:
        return self.message
class NotFoundError(KanbanError):
    pass
class ConstraintViolationError(KanbanError):
    pass
class InvariantViolationError(KanbanError):
    pass
class AggregateLoadError(KanbanError):
    pass
class StoreError(KanbanError):
    pass
def classify(exc: BaseException) -> type[KanbanError]:
    if isinstance(exc, KanbanError):
        return type(exc)
    if isinstance(exc, NoResultFound):
        return NotFoundError
    if isinstance(exc, IntegrityError):
        return ConstraintViolationError
    return StoreError
@contextmanager
def wrapped(operation: str, as_type: Optional[type[KanbanError]] = None) -> Iterator[None]:
    """Re-raise store and manager errors prefixed with operation.

    as_type forces the resulting class; otherwise the class of the innermost
    classified error is kept.
    """
    try:
        yield
    except (KanbanError, SQLAlchemyError) as exc:
        error_type = as_type or classify(exc)
        detail = exc.message if isinstance(exc, KanbanError) else _describe(exc)
        raise error_type(f"{operation} -> {detail}") from exc
def _describe(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return f"{type(orig).__name__}: {orig}"
    return f"{type(exc).__name__}: {exc}"

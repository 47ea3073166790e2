"""
Unit of work: run several repository operations as one transaction.
"""

from typing import Any, Awaitable, Callable, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from resource_manager.core.exceptions import ConflictError
from resource_manager.core.logging import get_logger

logger = get_logger(__name__)

Operation = Callable[[], Awaitable[Any]]

UNIQUE_VIOLATION_SQLSTATE = "23505"


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell uniqueness violations apart from other integrity errors (FK, CHECK, NOT NULL)."""
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(orig).lower()
    return "unique constraint" in message or "duplicate key" in message


class UnitOfWork:
    """
    Executes operations in order and commits once.

    Operations are zero-argument callables returning awaitables, typically
    ``functools.partial(repo.create, **fields)``. If any of them fails the
    session is rolled back, so no partial write is ever visible. Uniqueness
    violations are raised as ConflictError; everything else propagates as is.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def run(
        self,
        *operations: Operation,
        conflict_message: str = "Record already exists",
    ) -> List[Any]:
        results: List[Any] = []
        try:
            for operation in operations:
                results.append(await operation())
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            if is_unique_violation(exc):
                logger.warning(
                    "Transaction rolled back on uniqueness violation",
                    extra={"operations": len(operations), "error": str(exc.orig)},
                )
                raise ConflictError(conflict_message) from exc
            logger.error(
                "Transaction rolled back on integrity error",
                extra={"operations": len(operations), "error": str(exc.orig)},
            )
            raise
        except Exception:
            await self.session.rollback()
            raise
        return results

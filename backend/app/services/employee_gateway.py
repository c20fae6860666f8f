"""
Employee Directory Backend - Employee Persistence Gateway
=========================================================

What:  The single point of contact with the employee table.
How:   Each method opens a short-lived AsyncSession from the shared pool,
       runs exactly one statement, and converts the result into Pydantic
       response objects before the session closes.
Who:   Called by the employee route handlers through the get_gateway
       dependency; constructed once in the lifespan with the pool engine.

Error Policy:
    Operation       Store error becomes
    ─────────────   ─────────────────────────────────────────────
    list_all        []     (fail-soft) or DatabaseError (strict)
    get_by_id       None   (fail-soft) or DatabaseError (strict)
    insert          DatabaseError
    update_by_id    DatabaseError  (None is reserved for "no match")
    delete_by_id    DatabaseError  (0 is reserved for "no match")

    The fail-soft column is the `fail_soft_reads` flag (FAIL_SOFT_READS).
    With it on, a store outage during a read is indistinguishable from an
    empty directory; writes always report the outage.

Write statements use RETURNING so the stored row (including the
store-assigned id) comes back in the same round trip.
"""

import logging
from typing import List, Optional, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.database import STORE_ERRORS, check_connection
from app.exceptions import DatabaseError
from app.models.employee import Employee
from app.schemas.employee import EmployeeCreate, EmployeeResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Columns returned by INSERT/UPDATE ... RETURNING
_RETURNING = (Employee.id, Employee.first_name, Employee.last_name, Employee.email)


class EmployeeGateway:
    """
    Typed CRUD operations against the employee table.

    The gateway holds no per-request state; it is safe to share one
    instance across all concurrently running requests. The engine's pool
    serialises access to connections.
    """

    def __init__(self, engine: AsyncEngine, fail_soft_reads: bool = True):
        self._engine = engine
        self._session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.fail_soft_reads = fail_soft_reads

    # ── Reads ─────────────────────────────────────────────────────────────

    async def list_all(self) -> List[EmployeeResponse]:
        """
        Every employee, ascending by id.

        Returns [] on a store error when fail_soft_reads is set.
        """
        try:
            async with self._session_factory() as session:
                result = await session.scalars(
                    select(Employee).order_by(Employee.id.asc())
                )
                return [EmployeeResponse.model_validate(emp) for emp in result]
        except STORE_ERRORS as e:
            return self._read_failed("list employees", e, [], {})

    async def get_by_id(self, employee_id: int) -> Optional[EmployeeResponse]:
        """
        The employee with this id, or None.

        Query plan: SELECT ... WHERE id = :id → primary key lookup.
        A store error also yields None when fail_soft_reads is set.
        """
        try:
            async with self._session_factory() as session:
                result = await session.scalars(
                    select(Employee).where(Employee.id == employee_id)
                )
                emp = result.one_or_none()
                return EmployeeResponse.model_validate(emp) if emp is not None else None
        except STORE_ERRORS as e:
            return self._read_failed(
                "fetch employee", e, None, {"employee_id": employee_id}
            )

    # ── Writes ────────────────────────────────────────────────────────────

    async def insert(self, fields: EmployeeCreate) -> EmployeeResponse:
        """
        Insert one employee and return it with the store-assigned id.

        Raises:
            DatabaseError: the insert failed (nothing is committed)
        """
        stmt = (
            insert(Employee)
            .values(**fields.model_dump())
            .returning(*_RETURNING)
        )
        try:
            async with self._session_factory.begin() as session:
                row = (await session.execute(stmt)).one()
        except STORE_ERRORS as e:
            raise self._write_failed("insert employee", e, {})

        created = EmployeeResponse.model_validate(dict(row._mapping))
        logger.info("Employee %d created", created.id)
        return created

    async def update_by_id(
        self, employee_id: int, fields: EmployeeCreate
    ) -> Optional[EmployeeResponse]:
        """
        Overwrite first_name, last_name and email of one employee.

        All three columns are written, so a field left out of `fields`
        becomes NULL.

        Returns:
            The post-update row, or None when no row has this id.

        Raises:
            DatabaseError: the update failed
        """
        stmt = (
            update(Employee)
            .where(Employee.id == employee_id)
            .values(**fields.model_dump())
            .returning(*_RETURNING)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory.begin() as session:
                row = (await session.execute(stmt)).one_or_none()
        except STORE_ERRORS as e:
            raise self._write_failed("update employee", e, {"employee_id": employee_id})

        if row is None:
            return None
        logger.info("Employee %d updated", employee_id)
        return EmployeeResponse.model_validate(dict(row._mapping))

    async def delete_by_id(self, employee_id: int) -> int:
        """
        Delete one employee.

        Returns:
            Number of rows removed: 1, or 0 when no row has this id.

        Raises:
            DatabaseError: the delete failed
        """
        stmt = (
            delete(Employee)
            .where(Employee.id == employee_id)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self._session_factory.begin() as session:
                result = await session.execute(stmt)
                affected = result.rowcount
        except STORE_ERRORS as e:
            raise self._write_failed("delete employee", e, {"employee_id": employee_id})

        if affected:
            logger.info("Employee %d deleted", employee_id)
        return affected

    # ── Health ────────────────────────────────────────────────────────────

    async def ping(self) -> bool:
        """True when SELECT 1 succeeds through the pool. Never raises."""
        try:
            await check_connection(self._engine)
        except STORE_ERRORS as e:
            logger.warning("Health check: database unreachable: %s", str(e))
            return False
        return True

    # ── Error translation ─────────────────────────────────────────────────

    def _read_failed(self, action: str, exc: Exception, fallback: T, context: dict) -> T:
        context["error_type"] = type(exc).__name__
        if self.fail_soft_reads:
            logger.warning(
                "Could not %s, answering with empty result: %s | Context: %s",
                action, str(exc), context,
            )
            return fallback
        logger.error("Database error (%s): %s", action, str(exc), exc_info=True)
        raise DatabaseError(
            message=f"Could not {action}. Please try again.",
            context=context,
        ) from exc

    @staticmethod
    def _write_failed(action: str, exc: Exception, context: dict) -> DatabaseError:
        context["error_type"] = type(exc).__name__
        logger.error("Database error (%s): %s", action, str(exc), exc_info=True)
        err = DatabaseError(message=f"Could not {action}. Please try again.", context=context)
        err.__cause__ = exc
        return err

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import HabitNotFoundError
from app.models.habit import HabitCompletion
from app.schemas.completion import CompletionCreate
from app.services.habits import habit_exists

logger = logging.getLogger(__name__)

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def upsert_insert_for(dialect_name: str):
    """INSERT construct supporting ON CONFLICT for this backend; others are refused."""
    try:
        return _UPSERT_DIALECTS[dialect_name]
    except KeyError:
        raise NotImplementedError(f"Atomic completion upsert is not supported on {dialect_name}")


def _with_date_range(query, start_date: Optional[date], end_date: Optional[date]):
    if start_date is not None:
        query = query.where(HabitCompletion.date >= start_date)
    if end_date is not None:
        query = query.where(HabitCompletion.date <= end_date)
    return query


async def get_completion(db: AsyncSession, habit_id: int, on_date: date) -> Optional[HabitCompletion]:
    result = await db.execute(
        select(HabitCompletion)
        .where(HabitCompletion.habit_id == habit_id)
        .where(HabitCompletion.date == on_date)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_habit_completions(
    db: AsyncSession,
    habit_id: int,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[HabitCompletion]:
    query = select(HabitCompletion).where(HabitCompletion.habit_id == habit_id)
    query = _with_date_range(query, start_date, end_date).order_by(HabitCompletion.date)
    result = await db.execute(query)
    return list(result.scalars().all())


async def list_completions(
    db: AsyncSession,
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
) -> List[HabitCompletion]:
    query = _with_date_range(select(HabitCompletion), start_date, end_date)
    result = await db.execute(query.order_by(HabitCompletion.date, HabitCompletion.habit_id))
    return list(result.scalars().all())


async def upsert_completion(db: AsyncSession, completion_in: CompletionCreate) -> HabitCompletion:
    """
    Insert the (habit, date) record or overwrite completed/notes on the existing one.

    Uses INSERT ... ON CONFLICT DO UPDATE against the unique (habit_id, date)
    key so two concurrent writes for the same day never produce two rows;
    the later commit wins.
    """
    if not await habit_exists(db, completion_in.habit_id):
        raise HabitNotFoundError(completion_in.habit_id)

    values = {
        "habit_id": completion_in.habit_id,
        "date": completion_in.date,
        "completed": completion_in.completed,
        "notes": completion_in.notes,
    }

    dialect_insert = upsert_insert_for(db.get_bind().dialect.name)
    stmt = dialect_insert(HabitCompletion).values(**values)
    stmt = stmt.on_conflict_do_update(
        index_elements=[HabitCompletion.habit_id, HabitCompletion.date],
        set_={"completed": stmt.excluded.completed, "notes": stmt.excluded.notes},
    )
    await db.execute(stmt)
    await db.commit()

    record = await get_completion(db, completion_in.habit_id, completion_in.date)
    logger.info(
        "Recorded habit %s on %s as %s",
        record.habit_id, record.date.isoformat(), "completed" if record.completed else "missed",
    )
    return record

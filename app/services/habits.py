import logging
from typing import List, Optional
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import OwnerNotFoundError
from app.models.habit import Habit, HabitCompletion
from app.models.user import User
from app.schemas.habit import HabitCreate, HabitUpdate

logger = logging.getLogger(__name__)


async def _ensure_owner_exists(db: AsyncSession, user_id: Optional[int]) -> None:
    if user_id is None:
        return
    owner = await db.execute(select(User.id).where(User.id == user_id))
    if owner.scalar_one_or_none() is None:
        raise OwnerNotFoundError(user_id)


async def list_habits(db: AsyncSession) -> List[Habit]:
    result = await db.execute(select(Habit).order_by(Habit.id))
    return list(result.scalars().all())


async def get_habit(db: AsyncSession, habit_id: int) -> Optional[Habit]:
    result = await db.execute(select(Habit).where(Habit.id == habit_id))
    return result.scalar_one_or_none()


async def habit_exists(db: AsyncSession, habit_id: int) -> bool:
    result = await db.execute(select(Habit.id).where(Habit.id == habit_id))
    return result.scalar_one_or_none() is not None


async def create_habit(db: AsyncSession, habit_in: HabitCreate) -> Habit:
    await _ensure_owner_exists(db, habit_in.user_id)

    habit = Habit(
        name=habit_in.name,
        description=habit_in.description,
        icon=habit_in.icon,
        color=habit_in.color,
        weekdays=habit_in.weekdays,
        reminder_time=habit_in.reminder_time,
        user_id=habit_in.user_id,
    )
    db.add(habit)
    await db.commit()
    await db.refresh(habit)
    logger.info("Created habit %s (%s)", habit.id, habit.name)
    return habit


async def update_habit(db: AsyncSession, habit_id: int, habit_in: HabitUpdate) -> Optional[Habit]:
    """Apply only the fields present in the request; returns None if the habit is gone."""
    habit = await get_habit(db, habit_id)
    if habit is None:
        return None

    changes = habit_in.model_dump(exclude_unset=True)
    if "user_id" in changes:
        await _ensure_owner_exists(db, changes["user_id"])

    for field, value in changes.items():
        setattr(habit, field, value)

    if changes:
        db.add(habit)
        await db.commit()
        await db.refresh(habit)
        logger.info("Updated habit %s: %s", habit_id, ", ".join(sorted(changes)))
    return habit


async def delete_habit(db: AsyncSession, habit_id: int) -> bool:
    """Delete a habit and every completion it owns in one transaction."""
    if not await habit_exists(db, habit_id):
        return False

    # children first; the FK cascade is not relied on
    removed = await db.execute(delete(HabitCompletion).where(HabitCompletion.habit_id == habit_id))
    await db.execute(delete(Habit).where(Habit.id == habit_id))
    await db.commit()
    logger.info("Deleted habit %s with %s completion records", habit_id, removed.rowcount)
    return True

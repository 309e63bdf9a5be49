import logging
import random
from datetime import date, timedelta
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from app.schemas.completion import CompletionCreate
from app.schemas.habit import HabitCreate
from app.services.completions import upsert_completion
from app.services.habits import create_habit, list_habits

logger = logging.getLogger(__name__)

SAMPLE_HABITS = [
    HabitCreate(name="Daily Meditation", description="10 minutes", icon="meditation", color="green", weekdays="MTWTFSS"),
    HabitCreate(name="Read 30 Minutes", description="Fiction book", icon="book", color="orange", weekdays="MTWTFSS"),
    HabitCreate(name="Exercise", description="30 minutes workout", icon="exercise", color="blue", weekdays="MTWTFSS"),
    HabitCreate(name="Learn a Language", description="15 minutes of Spanish", icon="language", color="yellow", weekdays="MTWTFSS"),
]

HISTORY_DAYS = 30
COMPLETION_PROBABILITY = 0.7


async def seed_initial_data(
    db: AsyncSession,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> bool:
    """Create the sample habits and a month of history. Does nothing if any habit exists."""
    if await list_habits(db):
        return False

    today = today or date.today()
    rng = rng or random.Random()

    habits = [await create_habit(db, habit_in) for habit_in in SAMPLE_HABITS]
    for offset in range(HISTORY_DAYS):
        day = today - timedelta(days=offset)
        for habit in habits:
            await upsert_completion(
                db,
                CompletionCreate(
                    habit_id=habit.id,
                    date=day,
                    completed=rng.random() < COMPLETION_PROBABILITY,
                ),
            )

    logger.info("Seeded %s sample habits with %s days of history", len(habits), HISTORY_DAYS)
    return True

import math
from typing import Dict, Iterable, List
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.errors import HabitNotFoundError
from app.schemas.stats import HabitStatResponse
from app.services.completions import list_habit_completions
from app.services.habits import habit_exists, list_habits


def round_half_up(value: float) -> int:
    """0.5 always rounds up (12.5 -> 13), unlike Python's banker's round()."""
    return int(math.floor(value + 0.5))


def get_completion_rate(completed: int, total: int) -> int:
    """% of recorded days marked completed (0 when nothing is recorded)"""
    if total == 0:
        return 0
    return round_half_up(completed / total * 100)


def get_current_streak(records: List) -> int:
    """
    Completed records counted back from the most recent one, stopping at the
    first record marked not completed. The most recent date is not compared to
    today, so a run that ended weeks ago still counts as current.
    """
    streak = 0
    for record in sorted(records, key=lambda r: r.date, reverse=True):
        if not record.completed:
            break
        streak += 1
    return streak


def get_longest_streak(records: List) -> int:
    """Longest run of completed records in date order. Calendar gaps are not breaks; only a False record is."""
    longest = 0
    run = 0
    for record in sorted(records, key=lambda r: r.date):
        if record.completed:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest


def calculate_habit_stats(records: Iterable) -> Dict[str, int]:
    """
    Statistics for one habit's completion records.

    `records` is any iterable of objects with `.date` and `.completed`; order
    does not matter. Empty input gives all zeros.
    """
    records = list(records)
    total_days = len(records)
    total_completions = sum(1 for r in records if r.completed)

    return {
        "current_streak": get_current_streak(records),
        "longest_streak": get_longest_streak(records),
        "completion_rate": get_completion_rate(total_completions, total_days),
        "total_completions": total_completions,
        "total_days": total_days,
    }


async def compute_stats(db: AsyncSession, habit_id: int) -> HabitStatResponse:
    if not await habit_exists(db, habit_id):
        raise HabitNotFoundError(habit_id)

    # full history: a date window would give windowed streaks
    records = await list_habit_completions(db, habit_id)
    return HabitStatResponse(id=habit_id, habit_id=habit_id, **calculate_habit_stats(records))


async def compute_all_stats(db: AsyncSession) -> List[HabitStatResponse]:
    habits = await list_habits(db)
    # one AsyncSession cannot run queries concurrently, so habits are walked in turn
    return [await compute_stats(db, habit.id) for habit in habits]

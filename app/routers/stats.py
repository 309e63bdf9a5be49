from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.core.errors import HabitNotFoundError
from app.schemas.stats import HabitStatResponse
from app.services.stats import compute_stats, compute_all_stats

router = APIRouter(prefix="/api", tags=["stats"])

@router.get("/stats", response_model=list[HabitStatResponse])
async def get_all_stats(db: AsyncSession = Depends(get_db)):
    return await compute_all_stats(db)


@router.get("/habits/{habit_id}/stats", response_model=HabitStatResponse)
async def get_habit_stats(habit_id: int, db: AsyncSession = Depends(get_db)):
    try:
        return await compute_stats(db, habit_id)
    except HabitNotFoundError:
        raise HTTPException(404, "Habit not found")

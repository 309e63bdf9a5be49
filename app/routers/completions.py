from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from datetime import date
from typing import Optional
from app.database import get_db
from app.core.errors import HabitNotFoundError
from app.schemas.completion import CalendarDate, CompletionCreate, CompletionResponse
from app.services import completions as completion_service

router = APIRouter(prefix="/api", tags=["completions"])


def check_date_range(start_date: Optional[date], end_date: Optional[date]):
    if start_date and end_date and start_date > end_date:
        raise HTTPException(400, "startDate must be on or before endDate")


@router.get("/completions", response_model=list[CompletionResponse])
async def list_completions(
    start_date: Optional[CalendarDate] = Query(None, alias="startDate"),
    end_date: Optional[CalendarDate] = Query(None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
):
    check_date_range(start_date, end_date)
    return await completion_service.list_completions(db, start_date, end_date)


@router.get("/habits/{habit_id}/completions", response_model=list[CompletionResponse])
async def list_habit_completions(
    habit_id: int,
    start_date: Optional[CalendarDate] = Query(None, alias="startDate"),
    end_date: Optional[CalendarDate] = Query(None, alias="endDate"),
    db: AsyncSession = Depends(get_db),
):
    check_date_range(start_date, end_date)
    return await completion_service.list_habit_completions(db, habit_id, start_date, end_date)


@router.post("/completions", response_model=CompletionResponse, status_code=status.HTTP_201_CREATED)
async def upsert_completion(completion_in: CompletionCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await completion_service.upsert_completion(db, completion_in)
    except HabitNotFoundError:
        raise HTTPException(404, "Habit not found")

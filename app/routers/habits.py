from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.core.errors import OwnerNotFoundError
from app.schemas.habit import HabitCreate, HabitUpdate, HabitResponse, DeleteResponse
from app.services import habits as habit_service

router = APIRouter(prefix="/api/habits", tags=["habits"])

@router.get("", response_model=list[HabitResponse])
async def list_habits(db: AsyncSession = Depends(get_db)):
    return await habit_service.list_habits(db)


@router.get("/{habit_id}", response_model=HabitResponse)
async def get_habit(habit_id: int, db: AsyncSession = Depends(get_db)):
    habit = await habit_service.get_habit(db, habit_id)
    if not habit:
        raise HTTPException(404, "Habit not found")
    return habit


@router.post("", response_model=HabitResponse, status_code=status.HTTP_201_CREATED)
async def create_habit(habit_in: HabitCreate, db: AsyncSession = Depends(get_db)):
    try:
        return await habit_service.create_habit(db, habit_in)
    except OwnerNotFoundError:
        raise HTTPException(400, "Owner user not found")


@router.patch("/{habit_id}", response_model=HabitResponse)
async def update_habit(habit_id: int, habit_in: HabitUpdate, db: AsyncSession = Depends(get_db)):
    try:
        habit = await habit_service.update_habit(db, habit_id, habit_in)
    except OwnerNotFoundError:
        raise HTTPException(400, "Owner user not found")
    if not habit:
        raise HTTPException(404, "Habit not found")
    return habit


@router.delete("/{habit_id}", response_model=DeleteResponse)
async def delete_habit(habit_id: int, db: AsyncSession = Depends(get_db)):
    if not await habit_service.delete_habit(db, habit_id):
        raise HTTPException(404, "Habit not found")
    return DeleteResponse(success=True)

from pydantic import Field
from app.schemas.habit import CamelModel

class HabitStatResponse(CamelModel):
    id: int        # same as habit_id; snapshots are not stored
    habit_id: int
    current_streak: int = Field(..., ge=0)
    longest_streak: int = Field(..., ge=0)
    completion_rate: int = Field(..., ge=0, le=100)
    total_completions: int = Field(..., ge=0)
    total_days: int = Field(..., ge=0)

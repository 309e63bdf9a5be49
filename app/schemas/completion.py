import re
from pydantic import BeforeValidator
from datetime import date as dt_date, datetime
from typing import Annotated, Optional
from app.schemas.habit import CamelModel

_CALENDAR_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def parse_calendar_date(value):
    """Only bare YYYY-MM-DD strings (or date objects); no timestamps, no time-of-day."""
    if isinstance(value, datetime):
        raise ValueError("Date must not carry a time of day")
    if isinstance(value, dt_date):
        return value
    if isinstance(value, str) and _CALENDAR_DATE_RE.fullmatch(value):
        return dt_date.fromisoformat(value)
    raise ValueError("Date must be a YYYY-MM-DD string")


CalendarDate = Annotated[dt_date, BeforeValidator(parse_calendar_date)]

class CompletionCreate(CamelModel):
    habit_id: int
    date: CalendarDate
    completed: bool
    notes: Optional[str] = None

class CompletionResponse(CamelModel):
    id: int
    habit_id: int
    date: dt_date
    completed: bool
    notes: Optional[str]
    created_at: datetime

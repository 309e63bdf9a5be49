from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional

HABIT_ICONS = (
    "meditation", "book", "exercise", "language", "workout", "coffee",
    "bike", "music", "write", "health", "timer", "code",
)
HABIT_COLORS = ("green", "blue", "orange", "yellow", "red", "purple")

ICON_PATTERN = "^(" + "|".join(HABIT_ICONS) + ")$"
COLOR_PATTERN = "^(" + "|".join(HABIT_COLORS) + ")$"
WEEKDAYS_PATTERN = "^[MTWFSmtwfs]+$"
REMINDER_PATTERN = "^([01][0-9]|2[0-3]):[0-5][0-9]$"


class CamelModel(BaseModel):
    """Shared config: snake_case in Python, camelCase on the wire."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class HabitCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None
    icon: str = Field(..., pattern=ICON_PATTERN)
    color: str = Field(..., pattern=COLOR_PATTERN)
    weekdays: str = Field(..., min_length=1, max_length=7, pattern=WEEKDAYS_PATTERN)
    reminder_time: Optional[str] = Field(None, pattern=REMINDER_PATTERN)
    user_id: Optional[int] = None

    @field_validator("reminder_time", mode="before")
    @classmethod
    def blank_reminder_is_none(cls, value):
        # The habit form posts "" when no reminder is picked
        if isinstance(value, str) and not value.strip():
            return None
        return value


class HabitUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, pattern=ICON_PATTERN)
    color: Optional[str] = Field(None, pattern=COLOR_PATTERN)
    weekdays: Optional[str] = Field(None, min_length=1, max_length=7, pattern=WEEKDAYS_PATTERN)
    reminder_time: Optional[str] = Field(None, pattern=REMINDER_PATTERN)
    user_id: Optional[int] = None

    @field_validator("reminder_time", mode="before")
    @classmethod
    def blank_reminder_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @model_validator(mode="after")
    def required_fields_not_null(self):
        for field in ("name", "icon", "color", "weekdays"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field} cannot be null")
        return self


class HabitResponse(CamelModel):
    id: int
    name: str
    description: Optional[str]
    icon: str
    color: str
    weekdays: str
    reminder_time: Optional[str]
    created_at: datetime
    user_id: Optional[int]


class DeleteResponse(BaseModel):
    success: bool

# app/core/errors.py
from typing import Any, Iterable, Mapping


class HabitNotFoundError(LookupError):
    def __init__(self, habit_id: int):
        super().__init__(f"Habit with id {habit_id} not found")
        self.habit_id = habit_id


class OwnerNotFoundError(LookupError):
    def __init__(self, user_id: int):
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> str:
    """
    Collapse pydantic error dicts into one readable line, e.g.
    'Validation error: String should have at least 1 character at "name"; Field required at "icon"'
    """
    parts = []
    for err in errors:
        # drop the leading "body"/"query"/"path" marker FastAPI prepends
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        msg = err.get("msg", "Invalid value")
        parts.append(f'{msg} at "{".".join(loc)}"' if loc else msg)
    return "Validation error: " + "; ".join(parts)

from __future__ import annotations

import math
from datetime import date
from typing import Any, Dict, List, Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

DEFAULT_ESTIMATED_HOURS = 2.0
DEFAULT_ENERGY_LEVEL = "medium"

PRIORITY_RANK: Dict[str, int] = {"High": 3, "Medium": 2, "Low": 1}

Placement = Literal["optimal", "fallback"]


def priority_rank(priority: Optional[str]) -> int:
    """Ordinal rank of a priority label; unknown labels rank below Low."""
    return PRIORITY_RANK.get(priority or "", 0)


def _coerce_hours(v: Any) -> float:
    # Anything that is not a positive finite number falls back to the default.
    try:
        hours = float(v)
    except (TypeError, ValueError):
        return DEFAULT_ESTIMATED_HOURS
    if not math.isfinite(hours) or hours <= 0:
        return DEFAULT_ESTIMATED_HOURS
    return hours


class TaskFields(BaseModel):
    title: str = Field(..., min_length=1)
    deadline: Optional[date] = None
    priority: Optional[str] = "Medium"
    estimated_hours: float = DEFAULT_ESTIMATED_HOURS
    type: str = "general"
    energy_level: Optional[str] = DEFAULT_ENERGY_LEVEL

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("title must not be blank")
        return v2

    @field_validator("estimated_hours", mode="before")
    @classmethod
    def hours_or_default(cls, v: Any) -> float:
        return _coerce_hours(v)

    @field_validator("energy_level", mode="before")
    @classmethod
    def energy_or_default(cls, v: Any) -> Any:
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_ENERGY_LEVEL
        return v


class Task(TaskFields):
    id: Optional[int] = None
    completed: bool = False


class TaskCreate(TaskFields):
    """Payload for creating a task. Unlike stored tasks, a deadline is mandatory."""

    model_config = ConfigDict(populate_by_name=True)

    deadline: date
    estimated_hours: float = Field(
        DEFAULT_ESTIMATED_HOURS,
        validation_alias=AliasChoices("estimated_hours", "estimatedHours"),
    )
    energy_level: Optional[str] = Field(
        DEFAULT_ENERGY_LEVEL,
        validation_alias=AliasChoices("energy_level", "energyLevel"),
    )


class TaskUpdate(TaskFields):
    completed: bool = False


class Assignment(BaseModel):
    """A task placed into a time range. Times are HHMM integers (1430 = 14:30)."""

    model_config = ConfigDict(frozen=True)

    task: str
    task_id: Optional[int] = None
    day: str
    start_time: int
    end_time: int
    scheduled: str
    deadline: Optional[date] = None
    priority: Optional[str] = None
    energy_level: Optional[str] = None
    duration: float
    placement: Placement = "optimal"


class ScheduleRequest(BaseModel):
    """
    Free time and power windows per day, e.g.
    {"availability": {"Mon": ["08:00-12:00"]}, "power": {"Mon": ["06:00-18:00"]}}
    """

    availability: Dict[str, List[str]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("availability", "availableSlots"),
    )
    power: Dict[str, List[str]] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("power", "powerSchedule"),
    )

    @field_validator("availability", "power", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return {} if v is None else v

from pydantic import BaseModel, Field
from typing import Literal, Optional, List

ConflictDimension = Literal["trainer", "room", "class"]
ConflictSeverity = Literal["error", "warning"]


class FormattedConflict(BaseModel):
    severity: ConflictSeverity
    icon: str
    title: str
    description: str
    course_name: Optional[str] = Field(default=None, alias="courseName")
    class_name: Optional[str] = Field(default=None, alias="className")
    trainer_name: Optional[str] = Field(default=None, alias="trainerName")
    dimensions: List[ConflictDimension]
    slot_ids: List[str] = Field(alias="slotIds")  # The two timetable slot IDs involved

    model_config = {"populate_by_name": True, "frozen": True}


class TimetableValidationReport(BaseModel):
    conflicts: List[FormattedConflict] = Field(default_factory=list)
    has_blocking_conflicts: bool = Field(default=False, alias="hasBlockingConflicts")
    summary: dict[str, int] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}

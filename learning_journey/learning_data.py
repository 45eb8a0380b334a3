"""
Models and loader for the learning data JSON document.

The document lists family members, the daily activity log used by the
heatmap, the topics shown on the timeline and the suggested next topics.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class LearningDataError(Exception):
    """Raised when the learning data document cannot be loaded."""

    pass


class Member(BaseModel):
    """A family member who logs learning activity."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    emoji: str = ""


class ActivityRecord(BaseModel):
    """One logged day of learning activity."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # Kept as the raw string; the activity index skips dates that don't parse,
    # including a missing one
    date: str = ""
    count: int = Field(..., ge=0, description="Number of topics covered that day")
    topics: list[str] = Field(default_factory=list)
    members: list[str] = Field(default_factory=list)

    @field_validator("date", mode="before")
    @classmethod
    def date_as_text(cls, value):
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)

    @field_validator("topics", "members", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        return [] if value is None else value


class Topic(BaseModel):
    """A topic that appears on the timeline."""

    model_config = ConfigDict(extra="ignore")

    title: str
    category: str = ""
    date: str
    member: str = ""
    description: str = ""


class Suggestion(BaseModel):
    """A suggested next topic for a member."""

    model_config = ConfigDict(extra="ignore")

    title: str
    description: str = ""
    member: str = ""


class LearningData(BaseModel):
    """The whole learning data document."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    started: str | None = None
    members: list[Member] = Field(default_factory=list)
    activity_log: list[ActivityRecord] = Field(default_factory=list, alias="activityLog")
    topics: list[Topic] = Field(default_factory=list)
    suggested_next: list[Suggestion] = Field(default_factory=list, alias="suggestedNext")

    def member_lookup(self) -> dict[str, Member]:
        """Map member id to member."""
        return {member.id: member for member in self.members}


def parse_learning_data(raw: dict) -> LearningData:
    """
    Validate an already-decoded learning data document.

    Args:
        raw: Decoded JSON object

    Returns:
        LearningData model

    Raises:
        LearningDataError: If the document doesn't match the expected shape
    """
    if not isinstance(raw, dict):
        raise LearningDataError("Learning data must be a JSON object.")

    try:
        return LearningData.model_validate(raw)
    except ValidationError as e:
        raise LearningDataError(f"Invalid learning data: {e}") from e


def load_learning_data(path: str | Path) -> LearningData:
    """
    Read and validate the learning data JSON file.

    Args:
        path: Path to learning.json

    Returns:
        LearningData model

    Raises:
        LearningDataError: If the file is missing, not JSON, or invalid
    """
    path = Path(path)

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LearningDataError(f"Could not read learning data from {path}: {e}") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise LearningDataError(f"Learning data in {path} is not valid JSON: {e}") from e

    return parse_learning_data(raw)


def member_label(member_id: str, members: dict[str, Member]) -> str:
    """Emoji and name for a member id, or the raw id if unknown."""
    member = members.get(member_id)
    if member is None:
        return member_id
    return f"{member.emoji}{member.name}"

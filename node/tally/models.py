from typing import Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class PollCreateIn(BaseModel):
    labels: List[str] = Field(..., examples=[["Proposal A", "Proposal B"]])


class VoteIn(BaseModel):
    proposal_index: int = Field(..., ge=0, examples=[0])


class MoodIn(BaseModel):
    category: int = Field(..., ge=0, examples=[0])
    note: str = Field("", examples=["coffee kicked in"])


class MoodRecord(BaseModel):
    """
    One identity's current mood. Replaced in place on resubmission.
    """
    model_config = ConfigDict(frozen=True)

    category: int
    note: str
    timestamp: int


class ResultRow(BaseModel):
    label: str
    count: int


class PollView(BaseModel):
    scope: str
    labels: List[str]
    counts: List[int]
    participant_count: int
    node: str


class WinnerOut(BaseModel):
    scope: str
    label: str
    count: int


class VoteOf(BaseModel):
    scope: str
    identity: str
    proposal_index: Optional[int]


class MoodView(BaseModel):
    scope: str
    counts: List[int]
    names: List[str]
    total_entries: int
    percentages: Dict[str, int]
    node: str

"""Pydantic schemas for the balance engine's inputs and outputs."""
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from dangi.config import DEFAULT_CURRENCY

EntityId = Union[int, str]


class Schema(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# ----- Split -----
class SplitType(str, Enum):
    EQUAL = "EQUAL"
    WEIGHTED = "WEIGHTED"
    PERCENTAGE = "PERCENTAGE"
    MANUAL = "MANUAL"


class Participant(Schema):
    id: EntityId
    name: str = ""
    weight: float = Field(1.0, ge=0)
    percentage: Optional[float] = Field(None, ge=0, le=100)


class CustomShare(Schema):
    participant_id: EntityId
    amount: float = Field(ge=0)


class SplitResult(Schema):
    participant_id: EntityId
    amount: float
    weight: float


# ----- Expense -----
class Share(Schema):
    participant_id: EntityId
    amount: float = Field(ge=0)
    weight_at_time: float = 1.0


class Expense(Schema):
    id: EntityId
    amount: int = Field(gt=0)
    payer_id: EntityId
    shares: list[Share] = []


# ----- Settlement -----
class Settlement(Schema):
    id: Optional[EntityId] = None
    from_id: EntityId
    to_id: EntityId
    amount: float = Field(gt=0)


class SuggestedSettlement(Schema):
    from_id: EntityId
    from_name: str
    to_id: EntityId
    to_name: str
    amount: int


# ----- Summary -----
class ParticipantBalance(Schema):
    participant_id: EntityId
    participant_name: str
    total_paid: float
    total_share: float
    balance: float


class SummaryInput(Schema):
    project_id: EntityId
    project_name: str
    currency: str = DEFAULT_CURRENCY
    expenses: list[Expense] = []
    participants: list[Participant] = []
    settlements: list[Settlement] = []


class ProjectSummary(Schema):
    project_id: EntityId
    project_name: str
    currency: str
    total_expenses: int
    participant_balances: list[ParticipantBalance]
    settlements: list[SuggestedSettlement]

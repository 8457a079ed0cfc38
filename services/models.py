# services/models.py

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ContactRow(BaseModel):
    """One data line of the input CSV."""
    model_config = ConfigDict(frozen=True)

    email: str
    interests: List[str] = Field(default_factory=list)


class RemoteContact(BaseModel):
    """The part of a remote contact record the migration needs."""
    model_config = ConfigDict(frozen=True)

    contact_id: str
    email: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "RemoteContact":
        # The API may hand back numeric ids
        return cls(contact_id=str(data["id"]), email=data.get("email") or "")


class OutcomeStatus(str, Enum):
    UPDATED = "Updated"
    SKIPPED = "Skipped"


class OutcomeRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str
    status: OutcomeStatus
    detail: str

    @classmethod
    def updated(cls, email: str, interests: List[str]) -> "OutcomeRecord":
        return cls(email=email, status=OutcomeStatus.UPDATED, detail=",".join(interests))

    @classmethod
    def skipped(cls, email: str, reason: str) -> "OutcomeRecord":
        return cls(email=email, status=OutcomeStatus.SKIPPED, detail=reason)

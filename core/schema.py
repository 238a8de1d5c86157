"""
Pydantic models for transaction records and query reports.
"""
from typing import Annotated, List, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field


def normalize_issue_id(v):
    """Normalize issue id (loaders may supply it as a string, or empty for no issue)."""
    if v is None or v == "":
        return None
    return int(v)


class Transaction(BaseModel):
    """
    A single financial transfer with optional compliance issue metadata.

    Accepts both snake_case field names and the camelCase keys of the
    source data (senderFullName, issueSolved, ...).
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    mtn: Optional[int] = Field(None, description="Transaction number")
    amount: float
    sender_full_name: str = Field(
        ..., validation_alias=AliasChoices("sender_full_name", "senderFullName")
    )
    sender_age: Optional[int] = Field(
        None, validation_alias=AliasChoices("sender_age", "senderAge")
    )
    beneficiary_full_name: str = Field(
        ..., validation_alias=AliasChoices("beneficiary_full_name", "beneficiaryFullName")
    )
    beneficiary_age: Optional[int] = Field(
        None, validation_alias=AliasChoices("beneficiary_age", "beneficiaryAge")
    )
    issue_id: Annotated[Optional[int], BeforeValidator(normalize_issue_id)] = Field(
        None, validation_alias=AliasChoices("issue_id", "issueId")
    )
    issue_solved: bool = Field(
        True, validation_alias=AliasChoices("issue_solved", "issueSolved")
    )
    issue_message: Optional[str] = Field(
        None, validation_alias=AliasChoices("issue_message", "issueMessage")
    )


class TransactionSummary(BaseModel):
    """Aggregate figures over a transaction list, for the reporting layer."""
    transaction_count: int = Field(..., ge=0)
    total_amount: float
    max_amount: Optional[float] = Field(
        None, description="Highest amount, None when there are no transactions"
    )
    unique_clients: int = Field(..., ge=0)
    unsolved_issue_ids: List[int] = Field(default_factory=list, description="Sorted ascending")
    solved_message_count: int = Field(0, ge=0)
    top_sender: Optional[str] = None

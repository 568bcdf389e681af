"""
Schema definitions for the task bridge.

This module defines the status categories, the run summary record and the
payload models of the tasks that take structured arguments.
"""

from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class StatusCategory(str, Enum):
    """Outcome categories tallied by the status counter."""

    APPLIED = "applied"
    ALREADY_APPLIED = "alreadyApplied"
    NO_LONGER_AVAILABLE = "noLongerAvailable"
    FAIL = "fail"
    SKIPPED = "skipped"

    @classmethod
    def names(cls) -> List[str]:
        return [member.value for member in cls]


class RunSummary(BaseModel):
    """Final outcome tally persisted at the end of a run.

    The failure count is stored as ``failed`` while the counter category is
    ``fail``. Consumers of the summary file read ``failed``. Values are not
    checked or coerced; they are written exactly as the caller sent them.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    applied: Optional[Any] = Field(None, description="Applications submitted")
    already_applied: Optional[Any] = Field(
        None, alias="alreadyApplied", description="Targets applied to in an earlier run"
    )
    no_longer_available: Optional[Any] = Field(
        None, alias="noLongerAvailable", description="Targets that disappeared"
    )
    failed: Optional[Any] = Field(None, description="Failed attempts")
    skipped: Optional[Any] = Field(None, description="Skipped targets")

    def to_file_dict(self) -> Dict[str, Any]:
        """Fields the caller supplied, keyed by their persisted names."""
        return self.model_dump(by_alias=True, exclude_unset=True)

    @classmethod
    def from_status_counts(cls, counts: Mapping[str, int]) -> "RunSummary":
        """Build a summary from a status counter snapshot."""
        return cls(
            applied=counts.get(StatusCategory.APPLIED.value, 0),
            alreadyApplied=counts.get(StatusCategory.ALREADY_APPLIED.value, 0),
            noLongerAvailable=counts.get(StatusCategory.NO_LONGER_AVAILABLE.value, 0),
            failed=counts.get(StatusCategory.FAIL.value, 0),
            skipped=counts.get(StatusCategory.SKIPPED.value, 0),
        )


class WriteJsonPayload(BaseModel):
    """Arguments of the ``writeJsonFile`` task."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(..., alias="filePath")
    data: Any = None


class WriteCsvPayload(BaseModel):
    """Arguments of the ``writeCSV`` task."""

    model_config = ConfigDict(populate_by_name=True)

    file_path: str = Field(..., alias="filePath")
    data: Union[Dict[str, Any], List[Dict[str, Any]]]
    headers: List[str]
    append: Optional[bool] = True

    def resolved_append(self) -> bool:
        # An explicit null behaves like an omitted flag.
        return True if self.append is None else self.append

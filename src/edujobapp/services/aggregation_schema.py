from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from edujobapp.domain.models import ApplicationType


class StatusBucket(str, Enum):
    """Collapsed outcome taxonomy used by the status chart."""

    ACCEPTED = "Accepted"
    REJECTED = "Rejected"
    UNKNOWN = "Unknown"


class StatusBreakdown(BaseModel):
    """
    Description: Outcome counts; every application lands in exactly one bucket.
    Layer: L3
    Input: Full snapshot
    Output: accepted / rejected / unknown counts (always emitted, even when zero)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    accepted: int = 0
    rejected: int = 0
    unknown: int = 0

    @property
    def total(self) -> int:
        return self.accepted + self.rejected + self.unknown

    def as_buckets(self) -> Dict[StatusBucket, int]:
        return {
            StatusBucket.ACCEPTED: self.accepted,
            StatusBucket.REJECTED: self.rejected,
            StatusBucket.UNKNOWN: self.unknown,
        }


class CountryGroup(BaseModel):
    """
    Description: One row of the job/education pyramid chart.
    Layer: L3
    Input: Applications sharing a country code
    Output: Raw counts plus mirrored chart values offset by the shared gap
    """

    model_config = ConfigDict(frozen=True, extra="forbid", alias_generator=to_camel, populate_by_name=True)

    code: str
    job: int = 0
    edu: int = 0
    job_value: float = 0.0
    edu_value: float = 0.0


class CountryPyramid(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    gap: float
    groups: Tuple[CountryGroup, ...] = Field(default_factory=tuple)


class TimelineBucket(BaseModel):
    """
    Description: Applications created on one local calendar day.
    Layer: L3
    Input: Applications grouped by creation date
    Output: job / edu counts for that day
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    date: dt.date
    job: int = 0
    edu: int = 0


TypeBreakdown = Dict[ApplicationType, int]

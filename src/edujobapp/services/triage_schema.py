from __future__ import annotations

from datetime import datetime
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from edujobapp.domain.models import Application


class TriageReport(BaseModel):
    """
    Description: "Needs attention" buckets evaluated against one instant.
    Layer: L4
    Input: Full snapshot + now
    Output: Drafts at risk or late, responses due today or overdue
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    evaluated_at: datetime
    drafts_expiring: Tuple[Application, ...] = Field(default_factory=tuple)
    responses_due: Tuple[Application, ...] = Field(default_factory=tuple)

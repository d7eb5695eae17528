from __future__ import annotations

import logging
from typing import Any, Iterable

from edujobapp.core.errors import ContractViolation
from edujobapp.domain.snapshot import coerce_snapshot
from edujobapp.services.summary_schema import SummaryCounts

log = logging.getLogger("summary")


def _count(value: Any, name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        log.warning("Rejected %s=%r", name, value)
        raise ContractViolation(f"{name} must be a non-negative integer, got {value!r}")
    return value


class SummaryService:
    """
    Description: Totals for the dashboard header cards.
    Layer: L5
    Input: applications + document_count + company_count
    Output: SummaryCounts
    """

    def summarize(self, applications: Iterable[Any], document_count: Any = 0, company_count: Any = 0) -> SummaryCounts:
        snapshot = coerce_snapshot(applications)
        return SummaryCounts(
            applications=len(snapshot),
            documents=_count(document_count, "document_count"),
            companies=_count(company_count, "company_count"),
        )

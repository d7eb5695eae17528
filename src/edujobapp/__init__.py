"""EduJobApp analytics package.

Pure computations over application snapshots: list filtering and sorting,
dashboard aggregates, deadline triage and summary counts.
"""

from __future__ import annotations

from edujobapp.engine import (
    aggregate_countries,
    aggregate_statuses,
    aggregate_timeline,
    aggregate_types,
    filter_and_sort,
    partition_by_domain,
    summarize,
    triage_drafts,
    triage_responses,
)

__all__ = [
    "aggregate_countries",
    "aggregate_statuses",
    "aggregate_timeline",
    "aggregate_types",
    "filter_and_sort",
    "partition_by_domain",
    "summarize",
    "triage_drafts",
    "triage_responses",
]

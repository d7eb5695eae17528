"""
src/edujobapp/engine.py
=======================
Function-call boundary for the presentation layer. Each function delegates to
a service built from the cached settings; all of them are pure and safe to call
concurrently against read-only snapshots.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from edujobapp.config import get_settings
from edujobapp.domain.models import Application, ApplicationType
from edujobapp.services.aggregation_schema import CountryGroup, StatusBreakdown, TimelineBucket
from edujobapp.services.aggregation_service import AggregationService
from edujobapp.services.list_view_schema import ALL, DomainPartition, SortKey
from edujobapp.services.list_view_service import ListViewService
from edujobapp.services.summary_schema import SummaryCounts
from edujobapp.services.summary_service import SummaryService
from edujobapp.services.triage_service import TriageService


def filter_and_sort(
    applications: Iterable[Any],
    status_filter: Any = ALL,
    type_filter: Any = ALL,
    sort_key: Any = SortKey.DATE_NEWEST,
) -> Tuple[Application, ...]:
    return ListViewService(get_settings()).filter_and_sort(applications, status_filter, type_filter, sort_key)


def partition_by_domain(ordered_applications: Sequence[Any]) -> DomainPartition:
    return ListViewService(get_settings()).partition_by_domain(ordered_applications)


def aggregate_types(applications: Iterable[Any]) -> Dict[ApplicationType, int]:
    return AggregationService(get_settings()).aggregate_types(applications)


def aggregate_statuses(applications: Iterable[Any]) -> StatusBreakdown:
    return AggregationService(get_settings()).aggregate_statuses(applications)


def aggregate_countries(applications: Iterable[Any]) -> Tuple[CountryGroup, ...]:
    return AggregationService(get_settings()).aggregate_countries(applications)


def aggregate_timeline(applications: Iterable[Any]) -> Tuple[TimelineBucket, ...]:
    return AggregationService(get_settings()).aggregate_timeline(applications)


def triage_drafts(applications: Iterable[Any], now: Optional[datetime] = None) -> Tuple[Application, ...]:
    return TriageService(get_settings()).triage_drafts(applications, now)


def triage_responses(applications: Iterable[Any], now: Optional[datetime] = None) -> Tuple[Application, ...]:
    return TriageService(get_settings()).triage_responses(applications, now)


def summarize(applications: Iterable[Any], document_count: Any = 0, company_count: Any = 0) -> SummaryCounts:
    return SummaryService().summarize(applications, document_count, company_count)

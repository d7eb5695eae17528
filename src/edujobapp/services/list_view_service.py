from __future__ import annotations

import logging
import unicodedata
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Type, Union

from edujobapp.config import Settings, get_settings
from edujobapp.core.clock import as_local
from edujobapp.core.errors import ContractViolation, allowed_values
from edujobapp.domain.models import Application, ApplicationStatus, ApplicationType
from edujobapp.domain.snapshot import coerce_snapshot
from edujobapp.services.list_view_schema import ALL, DomainPartition, ListView, SortKey

log = logging.getLogger("list_view")


def collation_key(text: Optional[str]) -> Tuple[str, str, str]:
    """
    Description: Locale-style sort key: base letters, then accents, then case.
    Layer: L2
    Input: str or None (None sorts as the empty string)
    Output: tuple usable as a sorted() key
    """
    s = text or ""
    decomposed = unicodedata.normalize("NFKD", s)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    # lowercase before uppercase on a tertiary difference
    return base, decomposed.casefold(), s.swapcase()


def _coerce_choice(value: Any, enum_cls: Type[Enum], name: str, allow_all: bool = True) -> Union[Enum, str]:
    if isinstance(value, enum_cls):
        return value
    # members of another enum are never accepted by value
    if isinstance(value, str) and not isinstance(value, Enum):
        token = value.strip().upper()
        if allow_all and token == ALL:
            return ALL
        try:
            return enum_cls(token)
        except ValueError:
            pass
    accepted = allowed_values(enum_cls, [ALL] if allow_all else [])
    log.warning("Rejected %s=%r", name, value)
    raise ContractViolation(f"Unrecognized {name} {value!r}; expected one of: {accepted}")


def _coerce_params(status_filter: Any, type_filter: Any, sort_key: Any) -> Tuple[Any, Any, SortKey]:
    return (
        _coerce_choice(status_filter, ApplicationStatus, "status filter"),
        _coerce_choice(type_filter, ApplicationType, "type filter"),
        _coerce_choice(sort_key, SortKey, "sort key", allow_all=False),
    )


def _date_key(app: Application):
    return as_local(app.creation_date)


_SORTERS: Dict[SortKey, Tuple[Callable[[Application], Any], bool]] = {
    SortKey.DATE_NEWEST: (_date_key, True),
    SortKey.DATE_OLDEST: (_date_key, False),
    SortKey.COMPANY_ASC: (lambda a: collation_key(a.company_name), False),
    SortKey.COMPANY_DESC: (lambda a: collation_key(a.company_name), True),
    SortKey.TITLE_ASC: (lambda a: collation_key(a.title), False),
    SortKey.TITLE_DESC: (lambda a: collation_key(a.title), True),
}


class ListViewService:
    """
    Description: Filter & sort engine behind the applications list screen.
    Layer: L2
    Input: Snapshot + status filter + type filter + sort key
    Output: Ordered applications, optionally split into jobs/education
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def filter_and_sort(
        self,
        applications: Iterable[Any],
        status_filter: Any = ALL,
        type_filter: Any = ALL,
        sort_key: Any = SortKey.DATE_NEWEST,
    ) -> Tuple[Application, ...]:
        """
        Description: Keep records matching both filters, then stable-sort by key.
        Layer: L2
        Input: applications + status filter (or ALL) + type filter (or ALL) + SortKey
        Output: tuple[Application, ...]
        """
        status, app_type, key = _coerce_params(status_filter, type_filter, sort_key)
        return self._apply(applications, status, app_type, key)

    def _apply(self, applications: Iterable[Any], status: Any, app_type: Any, key: SortKey) -> Tuple[Application, ...]:
        snapshot = coerce_snapshot(applications)

        kept = [
            a
            for a in snapshot
            if (status == ALL or a.app_status is status) and (app_type == ALL or a.application_type is app_type)
        ]
        key_fn, descending = _SORTERS[key]
        # sorted() stays stable with reverse=True
        ordered = tuple(sorted(kept, key=key_fn, reverse=descending))

        log.debug("filter_and_sort: %d -> %d records (status=%s type=%s sort=%s)",
                  len(snapshot), len(ordered), status, app_type, key.value)
        return ordered

    def partition_by_domain(self, ordered: Sequence[Any]) -> DomainPartition:
        """
        Description: Split an ordered list into JOB records and everything else.
        Layer: L2
        Input: ordered applications
        Output: DomainPartition(jobs, education)
        """
        snapshot = coerce_snapshot(ordered)
        jobs = tuple(a for a in snapshot if a.is_job)
        education = tuple(a for a in snapshot if not a.is_job)
        return DomainPartition(jobs=jobs, education=education)

    def filter_and_partition(
        self,
        applications: Iterable[Any],
        status_filter: Any = ALL,
        type_filter: Any = ALL,
        sort_key: Any = SortKey.DATE_NEWEST,
    ) -> ListView:
        status, app_type, key = _coerce_params(status_filter, type_filter, sort_key)
        ordered = self._apply(applications, status, app_type, key)
        return ListView(
            status_filter=ALL if status == ALL else status.value,
            type_filter=ALL if app_type == ALL else app_type.value,
            sort_key=key,
            applications=ordered,
            partition=self.partition_by_domain(ordered),
        )

from __future__ import annotations

from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from edujobapp.domain.models import Application

ALL = "ALL"


class SortKey(str, Enum):
    DATE_NEWEST = "DATE_NEWEST"
    DATE_OLDEST = "DATE_OLDEST"
    COMPANY_ASC = "COMPANY_ASC"
    COMPANY_DESC = "COMPANY_DESC"
    TITLE_ASC = "TITLE_ASC"
    TITLE_DESC = "TITLE_DESC"


class DomainPartition(BaseModel):
    """
    Description: Ordered list view split into job and education groups.
    Layer: L2
    Input: Filtered + sorted applications
    Output: Two disjoint tuples preserving the incoming order
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    jobs: Tuple[Application, ...] = Field(default_factory=tuple)
    education: Tuple[Application, ...] = Field(default_factory=tuple)


class ListView(BaseModel):
    """
    Description: Everything a list screen needs from one filter/sort request.
    Layer: L2
    Input: Snapshot + status filter + type filter + sort key
    Output: Ordered applications and their job/education partition
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    status_filter: str
    type_filter: str
    sort_key: SortKey
    applications: Tuple[Application, ...] = Field(default_factory=tuple)
    partition: DomainPartition = Field(default_factory=DomainPartition)

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Tuple

from pydantic import ValidationError

from edujobapp.core.errors import ContractViolation
from edujobapp.domain.models import Application

log = logging.getLogger("snapshot")


def coerce_snapshot(applications: Any) -> Tuple[Application, ...]:
    """
    Description: Freeze a caller-supplied collection into an immutable snapshot.
    Layer: L1
    Input: Sequence/iterable of Application records or mappings
    Output: tuple[Application, ...] preserving input order
    """
    if applications is None or isinstance(applications, (str, bytes, Mapping)):
        log.warning("Rejected non-collection snapshot of type %s", type(applications).__name__)
        raise ContractViolation(
            f"applications must be a collection of Application records, got {type(applications).__name__}"
        )
    try:
        items = list(applications)
    except TypeError as exc:
        log.warning("Rejected non-iterable snapshot of type %s", type(applications).__name__)
        raise ContractViolation(
            f"applications must be a collection of Application records, got {type(applications).__name__}"
        ) from exc

    out = []
    for idx, item in enumerate(items):
        if isinstance(item, Application):
            out.append(item)
            continue
        if not isinstance(item, Mapping):
            raise ContractViolation(f"applications[{idx}] is {type(item).__name__}, expected Application or mapping")
        try:
            out.append(Application.model_validate(item))
        except ValidationError as exc:
            raise ContractViolation(f"applications[{idx}] is not a valid Application: {exc}") from exc
    return tuple(out)

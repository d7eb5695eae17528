from __future__ import annotations

from enum import Enum
from typing import Iterable, Type


class ContractViolation(ValueError):
    """
    Description: Raised when a caller passes input outside the engine contract.
    Layer: L0
    Input: Unknown enum value, non-collection snapshot, invalid record or count
    Output: Exception carrying a descriptive message
    """


def allowed_values(enum_cls: Type[Enum], extra: Iterable[str] = ()) -> str:
    values = [str(m.value) for m in enum_cls] + list(extra)
    return ", ".join(values)

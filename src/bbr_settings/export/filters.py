"""
Filters used to select which settings an export includes.

A filter is a predicate over (logical name, kind tag). An entry is exported
when any active filter matches it. Filter names that are not recognized
become literal substring filters instead of errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Sequence, Tuple


class FilterKind(Enum):
    """Built-in filter predicates."""

    HITMARKERS = "hitmarkers"
    KEYBINDINGS = "keybindings"
    SENSITIVITY = "sensitivity"
    AUDIO = "audio"
    MANUAL = "manual"


@dataclass(frozen=True)
class Filter:
    """A single export filter.

    ``pattern`` is only used by MANUAL filters.
    """

    kind: FilterKind
    pattern: str = ""

    def matches(self, name: str, typ: str) -> bool:
        """Check whether the entry (name, typ) passes this filter."""
        if self.kind is FilterKind.HITMARKERS:
            return "HitMarker" in name
        if self.kind is FilterKind.KEYBINDINGS:
            return "key" in name or "axis" in name or typ in ("key", "axis")
        if self.kind is FilterKind.SENSITIVITY:
            return "Sensitivity" in name
        if self.kind is FilterKind.AUDIO:
            return "Volume" in name
        return self.pattern in name

    def describe(self) -> str:
        """Human readable label for log lines."""
        if self.kind is FilterKind.MANUAL:
            return f"contains {self.pattern!r}"
        return self.kind.value


HITMARKERS = Filter(FilterKind.HITMARKERS)
KEYBINDINGS = Filter(FilterKind.KEYBINDINGS)
SENSITIVITY = Filter(FilterKind.SENSITIVITY)
AUDIO = Filter(FilterKind.AUDIO)

# Expanded by the "common" filter name
COMMON_FILTERS: Tuple[Filter, ...] = (HITMARKERS, KEYBINDINGS, AUDIO)

_NAMED_FILTERS = {
    "hitmarkers": (HITMARKERS,),
    "keybindings": (KEYBINDINGS,),
    "sensitivity": (SENSITIVITY,),
    "audio": (AUDIO,),
    "common": COMMON_FILTERS,
}


def split_filter_tokens(tokens: Iterable[str]) -> List[str]:
    """Flatten comma separated filter arguments into single tokens.

    Example:
        ["keybindings,audio", "Crosshair"] -> ["keybindings", "audio", "Crosshair"]
    """
    result: List[str] = []
    for token in tokens:
        for part in token.split(","):
            part = part.strip()
            if part:
                result.append(part)
    return result


def parse_filters(tokens: Iterable[str]) -> List[Filter]:
    """Turn filter arguments into Filter objects.

    Never rejects a token: unknown names become MANUAL substring filters.
    """
    result: List[Filter] = []
    for token in split_filter_tokens(tokens):
        named = _NAMED_FILTERS.get(token)
        if named is not None:
            result.extend(named)
        else:
            result.append(Filter(FilterKind.MANUAL, token))
    return result


def matches_any(filters: Sequence[Filter], name: str, typ: str) -> bool:
    """Union semantics: True if no filters are given or any filter matches."""
    if not filters:
        return True
    return any(f.matches(name, typ) for f in filters)

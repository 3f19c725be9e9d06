"""A yearly calendar holding a list of holidays."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from itertools import islice
from typing import NamedTuple, Optional

from bizcal.holiday import Holiday

# Default limits for the per-calendar holiday lookup cache.
CACHE_MAX_SIZE = 365 * 3
CACHE_EVICT_SIZE = 30


class HolidayMatch(NamedTuple):
    """Result of a holiday lookup for one date."""

    actual: bool
    observed: bool
    holiday: Optional[Holiday]


_NO_MATCH = HolidayMatch(False, False, None)


@dataclass
class Calendar:
    """A calendar with holidays, optionally limited to certain time zones.

    With ``cacheable`` set, lookups are remembered; do not change the
    holiday definitions while it is on.
    """

    name: str = ""
    description: str = ""
    locations: Optional[list[Optional[tzinfo]]] = None
    holidays: list[Holiday] = field(default_factory=list)
    cacheable: bool = False
    cache_max_size: int = CACHE_MAX_SIZE
    cache_evict_size: int = CACHE_EVICT_SIZE
    _cache: dict[tuple[int, int, int], HolidayMatch] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def is_applicable(self, loc: tzinfo | None) -> bool:
        """Report whether the calendar applies in ``loc``; true when no locations are set."""
        if self.locations is None:
            return True
        return any(loc is candidate or loc == candidate for candidate in self.locations)

    def add_holiday(self, *holidays: Holiday) -> None:
        """Append holidays to the calendar."""
        self.holidays.extend(holidays)

    def is_holiday(self, date: datetime) -> HolidayMatch:
        """Report whether ``date`` is a holiday's actual or observed day."""
        if not self.holidays or not self.is_applicable(date.tzinfo):
            return _NO_MATCH

        key = (date.year, date.month, date.day)
        if self.cacheable and key in self._cache:
            return self._cache[key]

        for hol in self.holidays:
            actual, observed = hol.calc(date.year)
            act_match = actual is not None and (actual.month, actual.day) == key[1:]
            obs_match = observed is not None and _ymd(observed) == key
            if act_match or obs_match:
                return self._remember(key, HolidayMatch(act_match, obs_match, hol))

            # Observances can spill into the neighbouring year, e.g. 1 January
            # on a Saturday observed on Friday 31 December.
            if not hol.observed:
                continue
            act_month = actual.month if actual is not None else 0
            if act_month == 1:
                neighbour = date.year + 1
            elif act_month == 12:
                neighbour = date.year - 1
            else:
                continue
            _, observed = hol.calc(neighbour)
            if observed is not None and _ymd(observed) == key:
                return self._remember(key, HolidayMatch(False, True, hol))

        return self._remember(key, _NO_MATCH)

    def _remember(self, key: tuple[int, int, int], match: HolidayMatch) -> HolidayMatch:
        if self.cacheable:
            if len(self._cache) >= self.cache_max_size:
                for old in list(islice(self._cache, self.cache_evict_size)):
                    del self._cache[old]
            self._cache[key] = match
        return match


def _ymd(t: datetime) -> tuple[int, int, int]:
    return t.year, t.month, t.day
"""Immutable domain models for the itinerary viewer.

All models are frozen dataclasses. A record keeps the raw column ->
value pairs of its source row so unknown columns stay reachable by
name, and exposes typed accessors for the known fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True, slots=True)
class ColumnNames:
    """Header names used to read the known fields of a record."""

    day: str = "Día"
    time: str = "Hora"
    activity: str = "Actividad"
    place: str = "Lugar/Detalles"
    transport: str = "Transporte recomendado"
    alternative: str = "Actividad alternativa"


@dataclass(frozen=True, slots=True)
class ItineraryRecord:
    """One row of the schedule.

    Attributes:
        items: (column, value) pairs in header order
        columns: Header names of the known fields
    """

    items: Tuple[Tuple[str, str], ...] = ()
    columns: ColumnNames = field(default_factory=ColumnNames, compare=False, repr=False)

    @classmethod
    def from_mapping(
        cls, values: Mapping[str, str], columns: Optional[ColumnNames] = None
    ) -> ItineraryRecord:
        """Build a record from a column -> value mapping, keeping its order."""
        return cls(
            items=tuple((str(k), str(v)) for k, v in values.items()),
            columns=columns or ColumnNames(),
        )

    @property
    def fields(self) -> Mapping[str, str]:
        """Read-only column -> value view of the record."""
        return MappingProxyType(dict(self.items))

    def get(self, name: str, default: str = "") -> str:
        """Return the value of column ``name``, or ``default`` if absent."""
        return self.fields.get(name, default)

    def as_dict(self) -> dict[str, str]:
        return dict(self.items)

    @property
    def day(self) -> str:
        return self.get(self.columns.day)

    @property
    def time(self) -> str:
        return self.get(self.columns.time)

    @property
    def activity(self) -> str:
        return self.get(self.columns.activity)

    @property
    def place(self) -> str:
        return self.get(self.columns.place)

    @property
    def transport(self) -> str:
        return self.get(self.columns.transport)

    @property
    def alternative(self) -> str:
        return self.get(self.columns.alternative)


@dataclass(frozen=True, slots=True)
class ItinerarySet:
    """Ordered sequence of records, in source row order.

    Attributes:
        records: Parsed rows
        headers: Trimmed header tokens of the source
        columns: Header names of the known fields
    """

    records: Tuple[ItineraryRecord, ...] = ()
    headers: Tuple[str, ...] = ()
    columns: ColumnNames = field(default_factory=ColumnNames, compare=False, repr=False)

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[ItineraryRecord]:
        return iter(self.records)

    def __bool__(self) -> bool:
        return bool(self.records)

    @property
    def day_labels(self) -> Tuple[str, ...]:
        """Distinct day labels in order of first appearance."""
        seen: dict[str, None] = {}
        for record in self.records:
            seen.setdefault(record.day, None)
        return tuple(seen)

    @property
    def is_empty(self) -> bool:
        return not self.records


class ViewStatus(Enum):
    """Lifecycle of a view: loading until the single load resolves."""

    LOADING = auto()
    ERROR = auto()
    READY = auto()


@dataclass(frozen=True, slots=True)
class ItineraryViewState:
    """Everything a view owns: the loaded set and the selected day.

    Instances are never mutated; every transition returns a new state.

    Attributes:
        status: Current lifecycle status
        itinerary: Loaded records (empty unless READY)
        selected_day: Day label currently shown
        error: User-visible failure message, set only when status is ERROR
    """

    status: ViewStatus = ViewStatus.LOADING
    itinerary: ItinerarySet = field(default_factory=ItinerarySet)
    selected_day: str = ""
    error: Optional[str] = None

    @classmethod
    def loading(cls, default_day: str = "") -> ItineraryViewState:
        return cls(status=ViewStatus.LOADING, selected_day=default_day)

    @classmethod
    def ready(cls, itinerary: ItinerarySet, default_day: str = "") -> ItineraryViewState:
        """READY state selecting the first day, or ``default_day`` if there is none."""
        labels = itinerary.day_labels
        return cls(
            status=ViewStatus.READY,
            itinerary=itinerary,
            selected_day=labels[0] if labels else default_day,
        )

    @classmethod
    def failed(cls, message: str, default_day: str = "") -> ItineraryViewState:
        return cls(status=ViewStatus.ERROR, selected_day=default_day, error=message)

    def with_selected_day(self, day: str) -> ItineraryViewState:
        return replace(self, selected_day=day)

    @property
    def is_ready(self) -> bool:
        return self.status is ViewStatus.READY


@dataclass(frozen=True, slots=True)
class GeoLocation:
    """GPS coordinates representing a geographic location."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError(
                f"Latitude must be between -90 and 90, got {self.latitude}"
            )
        if not -180 <= self.longitude <= 180:
            raise ValueError(
                f"Longitude must be between -180 and 180, got {self.longitude}"
            )


@dataclass(frozen=True, slots=True)
class Place:
    """A geocoded place of the itinerary.

    Attributes:
        query: The text that was geocoded
        name: Display name returned by the geocoder
        location: GPS coordinates
    """

    query: str
    name: str
    location: GeoLocation

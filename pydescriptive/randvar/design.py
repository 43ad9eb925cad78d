"""
Configuration objects for CachedRandomVariable.

UpdateExclusions selects which optional cache fields update() skips.
Metadata describes the variable; MetadataUpdate carries a partial change
in which every field may be left UNSET to keep the current value.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace


class _Unset:
    """Marker for a metadata field that the caller did not supply."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'UNSET'

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()


@dataclass(frozen=True)
class UpdateExclusions:
    """
    Fields that update() should not compute.

    True excludes the field; an excluded field is reset to 0.0. Mean,
    median, variance and standard deviation are always computed since the
    other fields depend on them.
    """
    skewness: bool = False
    kurtosis: bool = False
    max: bool = False
    min: bool = False
    range: bool = False
    weighted_mean: bool = False

    @classmethod
    def all(cls) -> UpdateExclusions:
        """Exclude every optional field."""
        return cls(**{f.name: True for f in fields(cls)})

    def excluded(self) -> tuple[str, ...]:
        """Names of the excluded fields."""
        return tuple(f.name for f in fields(self) if getattr(self, f.name))


@dataclass(frozen=True)
class Metadata:
    """
    Descriptive record identifying a random variable.

    Attributes:
        name: Variable name
        units: Measurement units
        timestamp: Free-form acquisition time
        source: Data source, such as a sensor or a database
        category: Label used to group variables in multivariable analysis
    """
    name: str | None = None
    units: str | None = None
    timestamp: str | None = None
    source: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class MetadataUpdate:
    """
    Partial change to a Metadata record.

    Fields left UNSET keep their current value. Any other value, including
    the empty string and None, replaces it.
    """
    name: str | None | _Unset = UNSET
    units: str | None | _Unset = UNSET
    timestamp: str | None | _Unset = UNSET
    source: str | None | _Unset = UNSET
    category: str | None | _Unset = UNSET

    def apply(self, meta: Metadata) -> Metadata:
        """Return ``meta`` with the supplied fields replaced."""
        changes = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }
        return replace(meta, **changes)

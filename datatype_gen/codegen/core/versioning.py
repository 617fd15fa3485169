"""
Field flattening and versioned-constructor planning.

A class-like definition gets one constructor for the base version and
one per later ``since`` version across its flattened field list, so code
written against any earlier version of the schema keeps compiling.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .generator import MissingDefaultValueError
from .schema import Field, VersionNumber


@dataclass(frozen=True)
class FieldValue:
    """Value a constructor passes for a field: a parameter or its default."""

    field: Field
    default: Optional[str] = None  # None when supplied by the caller

    @property
    def provided(self) -> bool:
        return self.default is None


@dataclass(frozen=True)
class ConstructorPlan:
    """Shape of the constructor generated for one version."""

    era: Optional[VersionNumber]
    parameters: Tuple[Field, ...]
    super_values: Tuple[FieldValue, ...]
    own_values: Tuple[FieldValue, ...]


def flatten_fields(super_fields: List[Field], own_fields: List[Field]) -> List[Field]:
    """Inherited fields (outermost ancestor first) followed by own fields."""
    return list(super_fields) + list(own_fields)


def distinct_versions(fields: List[Field]) -> List[VersionNumber]:
    """Base version plus the sorted distinct ``since`` versions of the fields."""
    return sorted({VersionNumber()} | {f.since for f in fields})


def partition_fields(
    fields: List[Field], era: VersionNumber
) -> Tuple[List[Field], List[Field]]:
    """
    Split fields into those available at ``era`` and those defaulted.

    Returns:
        (provided, by_default), both in declaration order
    """
    provided = [f for f in fields if f.since <= era]
    by_default = [f for f in fields if f.since > era]
    return provided, by_default


def plan_constructors(
    owner: str, super_fields: List[Field], own_fields: List[Field]
) -> List[ConstructorPlan]:
    """
    Plan one constructor per version, oldest first.

    A definition without any fields still gets a single no-argument
    constructor.

    Raises:
        MissingDefaultValueError: If a field newer than some version has
            no default value to fill in for it
    """
    all_fields = flatten_fields(super_fields, own_fields)
    if not all_fields:
        return [ConstructorPlan(era=None, parameters=(), super_values=(), own_values=())]

    plans = []
    for era in distinct_versions(all_fields):
        provided, _ = partition_fields(all_fields, era)

        def value_of(f: Field) -> FieldValue:
            if f.since <= era:
                return FieldValue(f)
            if f.default is None:
                raise MissingDefaultValueError(f, owner, era)
            return FieldValue(f, f.default)

        plans.append(
            ConstructorPlan(
                era=era,
                parameters=tuple(provided),
                super_values=tuple(value_of(f) for f in super_fields),
                own_values=tuple(value_of(f) for f in own_fields),
            )
        )
    return plans

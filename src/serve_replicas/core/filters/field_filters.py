"""Per-field filter predicates for replica records."""

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any


def read_field(item: Any, field_name: str) -> str | None:
    """Read ``field_name`` from a mapping or attribute-style item.

    Enum members are reduced to their value so ``ReplicaState.RUNNING``
    reads as ``"RUNNING"``. Missing fields read as None.
    """
    if isinstance(item, Mapping):
        value = item.get(field_name)
    else:
        value = getattr(item, field_name, None)

    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    return str(value)


class FieldFilter:
    """Base predicate deciding whether one field of an item matches a term.

    Subclasses implement ``matches``; ``apply`` filters a whole collection.
    An item whose field is missing never matches an active term.
    """

    def matches(self, item: Any, search_term: str, field_name: str) -> bool:
        raise NotImplementedError

    def apply(
        self,
        items: Iterable[Any],
        search_term: str,
        field_name: str,
    ) -> list[Any]:
        """Apply the predicate to items.

        A blank search term places no constraint and returns every item.
        """
        items = list(items)
        if not self.validate(search_term):
            return items

        return [item for item in items if self.matches(item, search_term, field_name)]

    @staticmethod
    def validate(search_term: str | None) -> bool:
        """Whether the term constrains anything at all."""
        return bool(search_term and search_term.strip())


class SubstringFilter(FieldFilter):
    """Filter items by case-sensitive substring search.

    Used for free-text identifier fields such as the replica id, where an
    operator types part of an id and expects every replica containing it.
    """

    def matches(self, item: Any, search_term: str, field_name: str) -> bool:
        value = read_field(item, field_name)
        return value is not None and search_term in value


class ExactMatchFilter(FieldFilter):
    """Filter items whose field equals the term exactly.

    ``allowed_values`` optionally names the fixed enumeration the field is
    drawn from; a term outside it matches nothing.
    """

    def __init__(self, allowed_values: Iterable[str] | None = None) -> None:
        self.allowed_values: frozenset[str] | None = (
            frozenset(allowed_values) if allowed_values is not None else None
        )

    def matches(self, item: Any, search_term: str, field_name: str) -> bool:
        if self.allowed_values is not None and search_term not in self.allowed_values:
            return False
        return read_field(item, field_name) == search_term

"""Tie-break policies for business-name resolution.

Business names are not unique: several tables (or columns) can contain the requested term. A
policy picks one candidate out of the ordered list of matches. The default keeps declaration
order ("first match wins"); `MostSpecificPolicy` is an opt-in behavior change.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Candidate(Generic[T]):
    """A contract entry whose business name contains the requested term."""

    physical_name: str
    business_name: str
    definition: T


class ResolutionPolicy(Protocol):
    name: str

    def choose(self, term: str, candidates: Sequence[Candidate[T]]) -> Candidate[T] | None:
        """Pick one candidate from matches listed in declaration order."""
        ...


class FirstMatchPolicy:
    """The first match in contract declaration order wins."""

    name = "first"

    def choose(self, term: str, candidates: Sequence[Candidate[T]]) -> Candidate[T] | None:
        return candidates[0] if candidates else None


class MostSpecificPolicy:
    """Prefer the business name the term covers most.

    An exact (case-insensitive) match wins; otherwise the shortest business name. Remaining ties
    fall back to declaration order.

    This deliberately inverts "longest matching business name": every candidate already contains
    the term, so the longest one is the one the term covers least. For `order` against `Order`,
    `Order Line` and `Sales Order Header`, this policy picks `Order`; longest-first would pick the
    header table.
    """

    name = "specific"

    def choose(self, term: str, candidates: Sequence[Candidate[T]]) -> Candidate[T] | None:
        if not candidates:
            return None

        wanted = term.casefold()

        def rank(indexed: tuple[int, Candidate[T]]) -> tuple[int, int, int]:
            idx, candidate = indexed
            exact = 0 if candidate.business_name.casefold() == wanted else 1
            return exact, len(candidate.business_name), idx

        return min(enumerate(candidates), key=rank)[1]


_POLICIES: dict[str, ResolutionPolicy] = {
    FirstMatchPolicy.name: FirstMatchPolicy(),
    MostSpecificPolicy.name: MostSpecificPolicy(),
}

DEFAULT_POLICY: ResolutionPolicy = _POLICIES[FirstMatchPolicy.name]


def policy_from_name(name: str) -> ResolutionPolicy:
    """Look up a policy by its configuration name (`first` or `specific`)."""

    try:
        return _POLICIES[name.lower()]
    except KeyError as exc:
        raise ValueError(f"Unknown resolution policy: {name}") from exc

"""Diff a clan's qualified members against the previous snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence, Set

    from .model import Member


@dataclass(frozen=True, slots=True)
class Reconciliation:
    new_members: list[Member]
    updated_entry: frozenset[str]


def reconcile(
    snapshot: Mapping[str, Set[str]],
    clan_tag: str,
    qualified_members: Sequence[Member],
) -> Reconciliation:
    """Return the members not seen last time and the clan's replacement entry.

    The entry is the full current qualified set, so members who stop qualifying
    are forgotten and reported again if they come back. ``snapshot`` is not
    modified; committing ``updated_entry`` is up to the caller.
    """

    prior = snapshot.get(clan_tag, frozenset())
    new_members = [member for member in qualified_members if member.tag not in prior]
    updated_entry = frozenset(member.tag for member in qualified_members)
    return Reconciliation(new_members=new_members, updated_entry=updated_entry)

from __future__ import annotations

from clanwatch.domain.model import ClanRole
from clanwatch.domain.qualification import select_qualified_members
from clanwatch.domain.reconciliation import reconcile
from tests.helpers.clans import make_member


def test_reconcile_reports_only_unseen_members_and_replaces_entry() -> None:
    snapshot = {"#AAA": frozenset({"#111", "#222"})}
    roster = [
        make_member("#111", 5000),
        make_member("#222", 3000),
        make_member("#333", 4500),
        make_member("#999", 9000, role=ClanRole.CO_LEADER),
    ]
    qualified = select_qualified_members(roster, min_trophies=4000)

    result = reconcile(snapshot, "#AAA", qualified)

    assert [m.tag for m in qualified] == ["#111", "#333"]
    assert [m.tag for m in result.new_members] == ["#333"]
    assert result.updated_entry == frozenset({"#111", "#333"})


def test_reconcile_does_not_mutate_snapshot() -> None:
    snapshot = {"#AAA": frozenset({"#111"})}

    reconcile(snapshot, "#AAA", [make_member("#222")])
    reconcile(snapshot, "#BBB", [make_member("#333")])

    assert snapshot == {"#AAA": frozenset({"#111"})}


def test_reconcile_treats_unknown_clan_as_empty_prior() -> None:
    members = [make_member("#2"), make_member("#1")]

    result = reconcile({}, "#NEW", members)

    assert result.new_members == members
    assert result.updated_entry == frozenset({"#1", "#2"})


def test_reconcile_is_idempotent_once_committed() -> None:
    members = [make_member("#1"), make_member("#2")]
    snapshot: dict[str, frozenset[str]] = {}

    first = reconcile(snapshot, "#AAA", members)
    snapshot["#AAA"] = first.updated_entry
    second = reconcile(snapshot, "#AAA", members)

    assert len(first.new_members) == 2
    assert second.new_members == []
    assert second.updated_entry == first.updated_entry


def test_reconcile_keeps_input_order_and_duplicates() -> None:
    members = [make_member("#3"), make_member("#1"), make_member("#3"), make_member("#2")]
    snapshot = {"#AAA": frozenset({"#2"})}

    result = reconcile(snapshot, "#AAA", members)

    assert [m.tag for m in result.new_members] == ["#3", "#1", "#3"]


def test_reconcile_forgets_members_that_stop_qualifying() -> None:
    snapshot = {"#AAA": frozenset({"#1", "#2"})}

    dropped = reconcile(snapshot, "#AAA", [make_member("#1")])
    snapshot["#AAA"] = dropped.updated_entry
    returned = reconcile(snapshot, "#AAA", [make_member("#1"), make_member("#2")])

    assert dropped.updated_entry == frozenset({"#1"})
    assert dropped.new_members == []
    assert [m.tag for m in returned.new_members] == ["#2"]


def test_reconcile_with_empty_qualified_list_clears_entry() -> None:
    result = reconcile({"#AAA": frozenset({"#1"})}, "#AAA", [])

    assert result.new_members == []
    assert result.updated_entry == frozenset()

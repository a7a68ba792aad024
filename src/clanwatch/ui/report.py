"""Render tracking results for the console."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from clanwatch.domain.tracking import FailureScope

if TYPE_CHECKING:
    from clanwatch.domain.model import ReportEntry
    from clanwatch.domain.tracking import TrackingResult

NO_NEW_MEMBERS = "No new qualified members found"


def _render_entry(entry: ReportEntry) -> list[str]:
    lines = [
        f"{entry.clan_name} (Level {entry.level}, {entry.points} points) - "
        f"{len(entry.new_members)} new members:"
    ]
    lines.extend(
        f"- {member.name:<15} {member.trophies:>4} trophies" for member in entry.new_members
    )
    return lines


def render_report(result: TrackingResult) -> str:
    lines: list[str] = []
    if result.entries:
        lines.append("New member report (regular members only):")
        for entry in result.entries:
            lines.append("")
            lines.extend(_render_entry(entry))
    else:
        lines.append(NO_NEW_MEMBERS)

    if result.failures:
        locations = sum(1 for f in result.failures if f.scope is FailureScope.LOCATION)
        clans = len(result.failures) - locations
        lines.append("")
        lines.append(f"Skipped {locations} location(s) and {clans} clan(s) after errors:")
        lines.extend(f"- [{f.scope}] {f.label}: {f.reason}" for f in result.failures)

    if not result.snapshot_saved:
        lines.append("")
        lines.append("Warning: snapshot could not be saved; these members may be reported again.")

    return "\n".join(lines) + "\n"


def report_as_json(result: TrackingResult) -> str:
    document = {
        "entries": [
            {
                "location": entry.location,
                "clanTag": entry.clan_tag,
                "clanName": entry.clan_name,
                "level": entry.level,
                "points": entry.points,
                "newMembers": [
                    {"tag": m.tag, "name": m.name, "trophies": m.trophies}
                    for m in entry.new_members
                ],
            }
            for entry in result.entries
        ],
        "failures": [
            {"scope": str(f.scope), "location": f.location, "label": f.label, "reason": f.reason}
            for f in result.failures
        ],
        "clansProcessed": result.clans_processed,
        "totalNewMembers": result.total_new_members,
        "snapshotSaved": result.snapshot_saved,
    }
    return json.dumps(document, ensure_ascii=False, indent=2) + "\n"

"""Group defects by the maintainers owning the files they occur in."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from ..maintainers.model import OwnershipFile
from ..maintainers.resolver import owner_ids, resolve_owners
from .model import DefectRecord

UNIDENTIFIED_OWNER = "Unidentified owner"
DEFAULT_LIST_MARKERS = ("Mailing List",)


@dataclass(frozen=True)
class Aggregation:
    persons: tuple[str, ...] = ()
    components: tuple[str, ...] = ()
    query_matches: tuple[DefectRecord, ...] = ()
    groups: dict[str, tuple[DefectRecord, ...]] = field(default_factory=dict)
    orphans: tuple[DefectRecord, ...] = ()
    owners_by_cid: dict[int, tuple[str, ...]] = field(default_factory=dict)

    @property
    def filtered(self) -> bool:
        return bool(self.persons or self.components)


def _by_cid(records: Iterable[DefectRecord]) -> tuple[DefectRecord, ...]:
    return tuple(sorted(records, key=lambda d: d.cid))


def aggregate(
    defects: Iterable[DefectRecord],
    ownership: OwnershipFile,
    persons: Sequence[str] = (),
    components: Sequence[str] = (),
) -> Aggregation:
    matches: dict[int, DefectRecord] = {}
    groups: dict[str, dict[int, DefectRecord]] = {}
    orphans: dict[int, DefectRecord] = {}
    owners_by_cid: dict[int, tuple[str, ...]] = {}

    for defect in defects:
        entries = resolve_owners(ownership, defect.file_path)
        owners_by_cid[defect.cid] = tuple(e.title for e in entries)
        for entry in entries:
            if any(p in mid for p in persons for mid in entry.maintainers):
                matches[defect.cid] = defect
            if entry.short_name in components:
                matches[defect.cid] = defect
        for mid in owner_ids(entries):
            groups.setdefault(mid, {})[defect.cid] = defect
        if not entries:
            groups.setdefault(UNIDENTIFIED_OWNER, {})[defect.cid] = defect
            orphans[defect.cid] = defect

    return Aggregation(
        persons=tuple(persons),
        components=tuple(components),
        query_matches=_by_cid(matches.values()),
        groups={mid: _by_cid(groups[mid].values()) for mid in sorted(groups)},
        orphans=_by_cid(orphans.values()),
        owners_by_cid=owners_by_cid,
    )


def is_list_address(identity: str, markers: Sequence[str] = DEFAULT_LIST_MARKERS) -> bool:
    return any(marker in identity for marker in markers)


def build_roster(groups: Iterable[str], markers: Sequence[str] = DEFAULT_LIST_MARKERS) -> list[str]:
    return sorted({mid for mid in groups if mid != UNIDENTIFIED_OWNER and not is_list_address(mid, markers)})

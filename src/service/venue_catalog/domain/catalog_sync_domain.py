"""
Section Catalog Sync - Domain Logic

Plans how a venue's section catalog changes to reflect the sections a map
actually contains. Pure: the plan is applied by SyncSectionCatalogUseCase.

[Modes]
- create: replace mode requested, or the catalog only holds generic
  placeholder sections ('Floor', 'Lower Bowl', any section_template name).
  Adds one section per candidate whose id is not yet linked. Never deletes.
- backfill: links svg paths onto existing unlinked sections by name.

[Invariants]
- At most one section per venue carries a given svg path (case-insensitive);
  a would-be duplicate is reported as ReconciliationConflict and skipped
- Re-running a plan against its own result changes nothing
"""

from enum import StrEnum
from typing import List, Sequence

import attrs

from src.platform.exception.exceptions import ReconciliationConflict
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.venue_catalog.domain.section_template import TEMPLATE_SECTION_NAMES
from src.service.venue_catalog.domain.value_object.map_document import SectionCandidate


GENERIC_SECTION_NAMES = (
    frozenset({'club', 'floor', 'lower bowl', 'upper bowl', 'orchestra', 'mezzanine', 'balcony'})
    | TEMPLATE_SECTION_NAMES
)


class SyncMode(StrEnum):
    NOOP = 'noop'
    CREATE = 'create'
    BACKFILL = 'backfill'


@attrs.define(frozen=True)
class SvgPathUpdate:
    section: SectionEntity
    svg_path: str


@attrs.define
class CatalogSyncPlan:
    mode: SyncMode
    sections_to_create: List[SectionEntity] = attrs.field(factory=list)
    svg_path_updates: List[SvgPathUpdate] = attrs.field(factory=list)
    conflicts: List[ReconciliationConflict] = attrs.field(factory=list)


def has_only_generic_sections(sections: Sequence[SectionEntity]) -> bool:
    """Vacuously true for an empty catalog"""
    return all(section.name.strip().lower() in GENERIC_SECTION_NAMES for section in sections)


def _compact_name(section_name: str) -> str:
    return ''.join(section_name.lower().split())


def _compact_key(candidate: SectionCandidate) -> str:
    return candidate.section_key.lower()


def names_match(section_name: str, candidate: SectionCandidate) -> bool:
    name, key = _compact_name(section_name), _compact_key(candidate)
    if not name or not key:
        return False
    return name == key or key in name or name in key


def plan_catalog_sync(
    *,
    venue_id: str,
    candidates: Sequence[SectionCandidate],
    existing_sections: Sequence[SectionEntity],
    replace_mode: bool = False,
    default_capacity: int = 100,
) -> CatalogSyncPlan:
    if not candidates:
        return CatalogSyncPlan(mode=SyncMode.NOOP)

    linked = {section.svg_path.lower() for section in existing_sections if section.svg_path}

    if replace_mode or has_only_generic_sections(existing_sections):
        plan = CatalogSyncPlan(mode=SyncMode.CREATE)
        next_sort_order = max((s.sort_order for s in existing_sections), default=-1) + 1
        for candidate in candidates:
            if candidate.raw_id.lower() in linked:
                continue
            linked.add(candidate.raw_id.lower())
            plan.sections_to_create.append(
                SectionEntity(
                    venue_id=venue_id,
                    name=candidate.display_name,
                    section_type=candidate.section_type,
                    svg_path=candidate.raw_id,
                    capacity=default_capacity,
                    is_general_admission=candidate.is_general_admission,
                    sort_order=next_sort_order,
                )
            )
            next_sort_order += 1
        return plan

    plan = CatalogSyncPlan(mode=SyncMode.BACKFILL)
    for section in existing_sections:
        if section.svg_path:
            continue
        candidate = next((c for c in candidates if names_match(section.name, c)), None)
        if candidate is None:
            continue
        if candidate.raw_id.lower() in linked:
            plan.conflicts.append(
                ReconciliationConflict(
                    venue_id=venue_id, svg_path=candidate.raw_id, section_name=section.name
                )
            )
            continue
        linked.add(candidate.raw_id.lower())
        plan.svg_path_updates.append(SvgPathUpdate(section=section, svg_path=candidate.raw_id))
    return plan

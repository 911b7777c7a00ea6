"""
Section Command Repository Implementation - CQRS Write Side
"""

from typing import AsyncContextManager, Callable, List

import attrs
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.types.record_id import new_record_id
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.shared_kernel.driven_adapter.model.section_model import SectionModel
from src.service.venue_catalog.app.interface.i_section_command_repo import ISectionCommandRepo


class SectionCommandRepoImpl(ISectionCommandRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def create_many(self, *, sections: List[SectionEntity]) -> List[SectionEntity]:
        if not sections:
            return []

        created = [attrs.evolve(section, id=section.id or new_record_id()) for section in sections]
        async with self.session_factory() as session:
            session.add_all(
                SectionModel(
                    id=section.id,
                    venue_id=section.venue_id,
                    name=section.name,
                    section_type=section.section_type.value,
                    svg_path=section.svg_path,
                    capacity=section.capacity,
                    row_count=section.row_count,
                    seats_per_row=section.seats_per_row,
                    is_general_admission=section.is_general_admission,
                    sort_order=section.sort_order,
                )
                for section in created
            )
            await session.commit()
        return created

    @Logger.io
    async def update_svg_path(self, *, section_id: str, svg_path: str) -> None:
        async with self.session_factory() as session:
            result = await session.execute(
                update(SectionModel).where(SectionModel.id == section_id).values(svg_path=svg_path)
            )
            if result.rowcount == 0:
                raise NotFoundError(f'Section not found: {section_id}')
            await session.commit()

"""
Section Query Repository Implementation - Shared Kernel
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.app.interface.i_section_query_repo import ISectionQueryRepo
from src.service.shared_kernel.domain.entity.section_entity import SectionEntity
from src.service.shared_kernel.domain.enum.section_type import SectionType
from src.service.shared_kernel.driven_adapter.model.section_model import SectionModel


def section_model_to_entity(model: SectionModel) -> SectionEntity:
    return SectionEntity(
        id=model.id,
        venue_id=model.venue_id,
        name=model.name,
        section_type=SectionType(model.section_type),
        svg_path=model.svg_path,
        capacity=model.capacity,
        row_count=model.row_count,
        seats_per_row=model.seats_per_row,
        is_general_admission=model.is_general_admission,
        sort_order=model.sort_order,
    )


class SectionQueryRepoImpl(ISectionQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        async with self.session_factory() as session:
            yield session

    @Logger.io
    async def list_by_venue(self, *, venue_id: str) -> List[SectionEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(SectionModel)
                .where(SectionModel.venue_id == venue_id)
                .order_by(SectionModel.sort_order, SectionModel.name)
            )
            return [section_model_to_entity(model) for model in result.scalars().all()]

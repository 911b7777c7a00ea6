import pytest

from src.platform.exception.exceptions import DomainError
from src.service.inventory.app.command.apply_discount_and_regenerate_use_case import (
    ApplyDiscountAndRegenerateUseCase,
)
from src.service.inventory.app.command.synthesize_event_sections_use_case import (
    SynthesizeEventSectionsUseCase,
)
from src.service.shared_kernel.domain.enum.section_type import SectionType
from test.service.in_memory_repos import InMemoryStore


@pytest.fixture
async def priced_event_id(
    store: InMemoryStore, synthesize_event_sections_use_case: SynthesizeEventSectionsUseCase
) -> str:
    venue = store.add_venue('Example Arena')
    store.add_section(venue.id, 'Section 101', section_type=SectionType.LOWER)
    store.add_section(venue.id, 'Section 305', section_type=SectionType.UPPER, sort_order=1)
    event = store.add_event(venue.id, 'Opening Night', price_from=50.0, price_to=150.0)
    await synthesize_event_sections_use_case.synthesize(event_id=event.id)
    return event.id


@pytest.mark.unit
class TestApplyDiscountAndRegenerateUseCase:
    @pytest.mark.asyncio
    async def test_discount_rewrites_envelope_and_records_list_price(
        self,
        store: InMemoryStore,
        priced_event_id: str,
        apply_discount_use_case: ApplyDiscountAndRegenerateUseCase,
    ) -> None:
        # Act
        result = await apply_discount_use_case.apply(event_id=priced_event_id, discount_percent=50)

        # Assert
        event = store.events[priced_event_id]
        assert (event.price_from, event.price_to) == (25.0, 75.0)
        assert (event.list_price_from, event.list_price_to) == (50.0, 150.0)
        assert (result.price_from, result.price_to) == (25.0, 75.0)
        assert result.listings_created == len(store.listings_of_event(priced_event_id))
        assert all(
            listing.price >= 18.75 for listing in store.listings_of_event(priced_event_id)
        )

    @pytest.mark.asyncio
    async def test_clear_existing_makes_reruns_idempotent(
        self,
        store: InMemoryStore,
        priced_event_id: str,
        apply_discount_use_case: ApplyDiscountAndRegenerateUseCase,
    ) -> None:
        first = await apply_discount_use_case.apply(
            event_id=priced_event_id, discount_percent=50, clear_existing=True
        )

        second = await apply_discount_use_case.apply(
            event_id=priced_event_id, discount_percent=50, clear_existing=True
        )

        event = store.events[priced_event_id]
        assert (event.price_from, event.price_to) == (25.0, 75.0)
        assert second.listings_cleared == first.listings_created
        assert len(store.listings_of_event(priced_event_id)) == second.listings_created

    @pytest.mark.asyncio
    async def test_without_clearing_listings_accumulate(
        self,
        store: InMemoryStore,
        priced_event_id: str,
        apply_discount_use_case: ApplyDiscountAndRegenerateUseCase,
    ) -> None:
        first = await apply_discount_use_case.apply(event_id=priced_event_id, discount_percent=10)
        second = await apply_discount_use_case.apply(event_id=priced_event_id, discount_percent=10)

        assert second.listings_cleared == 0
        assert len(store.listings_of_event(priced_event_id)) == (
            first.listings_created + second.listings_created
        )

    @pytest.mark.asyncio
    async def test_invalid_discount_changes_nothing(
        self,
        store: InMemoryStore,
        priced_event_id: str,
        apply_discount_use_case: ApplyDiscountAndRegenerateUseCase,
    ) -> None:
        with pytest.raises(DomainError):
            await apply_discount_use_case.apply(event_id=priced_event_id, discount_percent=100)

        event = store.events[priced_event_id]
        assert (event.price_from, event.list_price_from) == (50.0, None)
        assert store.listings_of_event(priced_event_id) == []

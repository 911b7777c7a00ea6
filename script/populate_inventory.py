#!/usr/bin/env python3
"""
Inventory Population Script
Price an event's sections and generate its ticket listings

Modes:
1. Default: create missing event sections, then generate listings
2. --discount N: mark the price envelope down N% from the list price and
   regenerate listings inside it (--clear drops the old listings first)
"""

import argparse
import asyncio
import sys

from src.platform.config.di import cleanup, container
from src.platform.exception.exceptions import CustomBaseError


async def populate(args: argparse.Namespace) -> None:
    created = await container.synthesize_event_sections_use_case().synthesize(
        event_id=args.event_id
    )
    print(f'   ✅ {len(created)} event section(s) created')

    result = await container.synthesize_listings_use_case().synthesize(
        event_id=args.event_id,
        target_quantity_per_section=args.tickets_per_section,
        price_variation=args.price_variation,
    )
    print(
        f'   ✅ {result.listings_created} listing(s), {result.tickets_created} ticket(s) '
        f'across {result.sections_processed} section(s)'
    )


async def discount(args: argparse.Namespace) -> None:
    result = await container.apply_discount_and_regenerate_use_case().apply(
        event_id=args.event_id,
        discount_percent=args.discount,
        tickets_per_section=args.tickets_per_section,
        clear_existing=args.clear,
    )
    print(f'   💸 New envelope: {result.price_from:.2f} - {result.price_to:.2f}')
    print(f'   🗑️  {result.listings_cleared} listing(s) removed')
    print(f'   ✅ {result.listings_created} listing(s) created')


async def main(args: argparse.Namespace) -> int:
    print(f'🔄 Populating inventory for event {args.event_id}')
    print('=' * 50)
    try:
        if args.discount is not None:
            await discount(args)
        else:
            await populate(args)
    except CustomBaseError as e:
        print(f'❌ {e.message}')
        return 1
    finally:
        await cleanup()
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Synthesize event sections and listings')
    parser.add_argument('event_id')
    parser.add_argument('--tickets-per-section', type=int, default=20)
    parser.add_argument('--price-variation', type=float, default=0.2)
    parser.add_argument('--discount', type=float, help='Discount percent in [0, 100)')
    parser.add_argument('--clear', action='store_true', help='Delete existing listings first')
    sys.exit(asyncio.run(main(parser.parse_args())))

#!/usr/bin/env python3
"""
Venue Map Ingestion Script
Ingest seating-chart documents into the venue catalog

Inputs (any mix):
- .zip archives: map documents plus an optional events manifest (.csv)
- folders: every map document inside (recursive)
- single map documents

Features:
1. Match each document to a stored venue by its declared name or file name
2. Attach the document and sync the venue's sections
3. --synthesize: price sections and generate listings for the venue's events
   (--generic-sections: venues without sections get a layout for their kind)
"""

import argparse
import asyncio
import csv
import sys
from pathlib import Path
from typing import Any, Dict, List

from src.platform.config.di import cleanup, container
from src.platform.constant.path import MAP_INBOX_DIR
from src.platform.database.orm_db_setting import create_db_and_tables
from src.service.ingestion.domain.map_file_filter import (
    has_map_extension,
    is_hidden_entry,
    is_manifest_file,
    looks_like_vector_map,
)
from src.service.venue_catalog.domain.value_object.map_document import MapDocument


def _read_text(path: Path) -> str:
    raw = path.read_bytes()
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        return raw.decode('latin-1')


def _collect_file(
    path: Path, documents: List[MapDocument], manifest_rows: List[Dict[str, Any]]
) -> None:
    if is_hidden_entry(path.name):
        return
    if is_manifest_file(path.name):
        manifest_rows.extend(csv.DictReader(_read_text(path).splitlines()))
        return
    if not has_map_extension(path.name):
        return
    content = _read_text(path)
    if looks_like_vector_map(content):
        documents.append(MapDocument(content=content, filename=path.name))
    else:
        print(f'   ⏭️  {path.name}: not a vector map, skipped')


def collect_inputs(paths: List[Path]) -> tuple[List[MapDocument], List[Dict[str, Any]]]:
    documents: List[MapDocument] = []
    manifest_rows: List[Dict[str, Any]] = []
    archive_reader = container.map_archive_reader()

    for path in paths:
        if path.suffix.lower() == '.zip':
            archive = archive_reader.read(path.read_bytes())
            documents.extend(archive.documents)
            manifest_rows.extend(archive.manifest_rows)
            for skipped in archive.skipped_files:
                print(f'   ⏭️  {path.name}:{skipped} skipped')
        elif path.is_dir():
            for child in sorted(p for p in path.rglob('*') if p.is_file()):
                _collect_file(child, documents, manifest_rows)
        elif path.is_file():
            _collect_file(path, documents, manifest_rows)
        else:
            print(f'   ⚠️  {path} does not exist')
    return documents, manifest_rows


async def main(args: argparse.Namespace) -> int:
    documents, manifest_rows = collect_inputs([Path(p) for p in args.paths])
    if not documents and not manifest_rows:
        print('❌ No map documents found')
        return 1

    print(f'🔄 Ingesting {len(documents)} map(s), {len(manifest_rows)} manifest row(s)')
    print('=' * 50)

    try:
        await create_db_and_tables(container.database())
        result = await container.ingest_venue_maps_use_case().ingest(
            documents=documents,
            manifest_rows=manifest_rows,
            force=args.force,
            replace_sections=args.replace_sections,
            synthesize_inventory=args.synthesize,
            generic_section_fallback=args.generic_sections,
            tickets_per_section=args.tickets_per_section,
        )
    finally:
        await cleanup()

    for match in result.matches:
        print(
            f'   ✅ {match.filename} -> {match.venue_name} ({match.strategy}): '
            f'{match.sections_created} created, {match.sections_updated} updated'
        )
    for filename in result.unmatched:
        print(f'   🔍 {filename}: no matching venue')
    for message in result.errors.errors:
        print(f'   ❌ {message}')
    if result.errors.suppressed_count:
        print(f'   ... and {result.errors.suppressed_count} more error(s)')

    print('=' * 50)
    for key, value in result.summary().items():
        print(f'{key}: {value}')
    return 0 if not result.documents_failed else 2


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Ingest venue seating-chart documents')
    parser.add_argument(
        'paths',
        nargs='*',
        default=[str(MAP_INBOX_DIR)],
        help='Zip archives, folders or map documents (default: the venue_maps folder)',
    )
    parser.add_argument('--force', action='store_true', help='Replace maps venues already have')
    parser.add_argument(
        '--replace-sections',
        action='store_true',
        help='Add a section for every extracted id instead of only backfilling svg paths',
    )
    parser.add_argument(
        '--synthesize', action='store_true', help="Price sections and stock the venue's events"
    )
    parser.add_argument(
        '--generic-sections',
        action='store_true',
        help='With --synthesize, seed a generic layout for venues that have no sections',
    )
    parser.add_argument('--tickets-per-section', type=int, default=20)
    sys.exit(asyncio.run(main(parser.parse_args())))

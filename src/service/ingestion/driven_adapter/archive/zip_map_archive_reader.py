"""
Zip Map Archive Reader

[Rules]
- Map files: .txt / .svg / .xml entries whose text carries vector markup;
  the base file name (no directories) becomes the document file name
- Manifest: every .csv entry, read as rows keyed by the header line
- Everything else (images, spreadsheets, macOS metadata) is skipped
"""

import csv
import io
from pathlib import PurePath
import zipfile

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ingestion.app.interface.i_map_archive_reader import IMapArchiveReader, MapArchive
from src.service.ingestion.domain.map_file_filter import (
    has_map_extension,
    is_hidden_entry,
    is_manifest_file,
    looks_like_vector_map,
)
from src.service.venue_catalog.domain.value_object.map_document import MapDocument


def _decode(raw: bytes) -> str:
    # utf-8-sig drops the BOM spreadsheet exports put in front
    try:
        return raw.decode('utf-8-sig')
    except UnicodeDecodeError:
        return raw.decode('latin-1')


class ZipMapArchiveReader(IMapArchiveReader):
    @Logger.io(truncate_content=True)
    def read(self, data: bytes) -> MapArchive:
        try:
            archive_file = zipfile.ZipFile(io.BytesIO(data))
        except zipfile.BadZipFile as e:
            raise DomainError(f'Not a zip archive: {e}')

        archive = MapArchive()
        with archive_file:
            for info in archive_file.infolist():
                if info.is_dir() or is_hidden_entry(info.filename):
                    continue
                basename = PurePath(info.filename).name

                if is_manifest_file(basename):
                    text = _decode(archive_file.read(info))
                    archive.manifest_rows.extend(csv.DictReader(io.StringIO(text)))
                    continue

                if has_map_extension(basename):
                    content = _decode(archive_file.read(info))
                    if looks_like_vector_map(content):
                        archive.documents.append(MapDocument(content=content, filename=basename))
                        continue

                archive.skipped_files.append(info.filename)

        Logger.base.info(
            f'📦 [ARCHIVE] {len(archive.documents)} maps, '
            f'{len(archive.manifest_rows)} manifest rows, '
            f'{len(archive.skipped_files)} skipped'
        )
        return archive

"""
Map File Filter

Decides whether an uploaded file is a seating-chart document: a text file
with a map extension whose content carries vector markup.
"""

from pathlib import PurePath


MAP_FILE_EXTENSIONS = frozenset({'.txt', '.svg', '.xml'})
MANIFEST_FILE_EXTENSIONS = frozenset({'.csv'})
VECTOR_MARKERS = ('<svg', '<path', '<g ', 'viewBox')


def has_map_extension(filename: str) -> bool:
    return PurePath(filename).suffix.lower() in MAP_FILE_EXTENSIONS


def is_manifest_file(filename: str) -> bool:
    return PurePath(filename).suffix.lower() in MANIFEST_FILE_EXTENSIONS


def looks_like_vector_map(content: str) -> bool:
    return any(marker in content for marker in VECTOR_MARKERS)


def is_hidden_entry(filename: str) -> bool:
    """macOS archive metadata and dotfiles"""
    path = PurePath(filename)
    return path.name.startswith('.') or '__MACOSX' in path.parts

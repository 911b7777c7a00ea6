"""
Venue Name Hint

Turns a map file name into a human venue name, e.g.
'madison_square_garden-seating.svg' -> 'Madison Square Garden'.
Used to name venues created from uploads and as a second match attempt.
"""

from pathlib import PurePath
import re


_SEPARATOR_PATTERN = re.compile(r'[_-]+')
_TRAILING_NOISE_PATTERN = re.compile(r'\s+(map|seating|chart|layout)$', re.IGNORECASE)


def venue_name_from_filename(filename: str) -> str:
    name = _SEPARATOR_PATTERN.sub(' ', PurePath(filename).stem).strip()
    # 'seating chart map' style suffixes can stack
    while (stripped := _TRAILING_NOISE_PATTERN.sub('', name)) != name:
        name = stripped
    return ' '.join(word.capitalize() for word in name.split())

"""
Name Matcher

Resolves a free-text venue name (from a map header, a file name, or an event
manifest row) to one entry of a pool of named records.

Tiers are evaluated in order over the whole pool; the first tier with any
satisfying entry wins, and within a tier the first entry in pool order wins:

1. exact: normalized strings are equal
2. containment: either normalized string contains the other
3. token overlap: enough significant words (length > 2) occur in the pool
   name, as substrings
"""

import re
from typing import Callable, Optional, Protocol, Sequence, TypeVar

import attrs


_SEPARATOR_PATTERN = re.compile(r'[_-]')
_NON_ALNUM_PATTERN = re.compile(r'[^a-z0-9\s]')
_WHITESPACE_PATTERN = re.compile(r'\s+')

MIN_SIGNIFICANT_WORD_LENGTH = 3
TOKEN_OVERLAP_REQUIRED = 2
SHORT_NAME_WORD_COUNT = 2  # Names with this many words or fewer need a single shared word


class NamedRecord(Protocol):
    @property
    def id(self) -> object: ...

    @property
    def name(self) -> str: ...


_R = TypeVar('_R', bound=NamedRecord)


def normalize(value: str) -> str:
    lowered = _SEPARATOR_PATTERN.sub(' ', value.lower())
    stripped = _NON_ALNUM_PATTERN.sub('', lowered)
    return _WHITESPACE_PATTERN.sub(' ', stripped).strip()


def significant_words(normalized: str) -> list[str]:
    return [word for word in normalized.split(' ') if len(word) >= MIN_SIGNIFICANT_WORD_LENGTH]


def _exact(candidate: str, pool_name: str) -> bool:
    return candidate == pool_name


def _containment(candidate: str, pool_name: str) -> bool:
    return pool_name in candidate or candidate in pool_name


def _token_overlap(candidate: str, pool_name: str) -> bool:
    words = significant_words(candidate)
    if not words:
        return False
    # Substring test: 'crypto' counts toward 'cryptocom arena'
    shared = sum(1 for word in words if word in pool_name)
    return shared >= TOKEN_OVERLAP_REQUIRED or (
        shared >= 1 and len(words) <= SHORT_NAME_WORD_COUNT
    )


@attrs.define(frozen=True)
class MatchStrategy:
    name: str
    predicate: Callable[[str, str], bool]


# Ordered: stronger evidence first
MATCH_STRATEGIES: tuple[MatchStrategy, ...] = (
    MatchStrategy(name='exact', predicate=_exact),
    MatchStrategy(name='containment', predicate=_containment),
    MatchStrategy(name='token_overlap', predicate=_token_overlap),
)


@attrs.define(frozen=True)
class NameMatch:
    record: NamedRecord
    strategy: str


def match_entry(candidate: str, pool: Sequence[_R]) -> Optional[NameMatch]:
    normalized_candidate = normalize(candidate)
    if not normalized_candidate:
        return None

    normalized_pool = [
        (record, normalized) for record in pool if (normalized := normalize(record.name))
    ]
    for strategy in MATCH_STRATEGIES:
        for record, normalized_name in normalized_pool:
            if strategy.predicate(normalized_candidate, normalized_name):
                return NameMatch(record=record, strategy=strategy.name)
    return None


def match(candidate: str, pool: Sequence[_R]) -> Optional[object]:
    """Return the id of the best-matching pool entry, or None"""
    found = match_entry(candidate, pool)
    return found.record.id if found else None

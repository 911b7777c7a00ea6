"""
Record identifiers

Every persisted record (venue, section, event, event section, listing) is keyed
by a UUID7 string: time-ordered, so insertion order survives as key order.
"""

from uuid_utils import uuid7


def new_record_id() -> str:
    return str(uuid7())

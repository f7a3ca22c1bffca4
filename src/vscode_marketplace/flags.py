"""
Query flags for the gallery extension query.

The gallery decides how much detail to return from a bitmask sent with each
query. ``QueryFlag`` names the recognised bit values and ``encode_flags``
combines them.
"""

from enum import IntEnum
from typing import Iterable


class QueryFlag(IntEnum):
    """Recognised gallery query flag values."""

    NONE = 0
    INCLUDE_VERSIONS = 1
    INCLUDE_FILES = 2
    INCLUDE_CATEGORY_AND_TAGS = 4
    INCLUDE_SHARED_ACCOUNTS = 8
    INCLUDE_VERSION_PROPERTIES = 16
    EXCLUDE_NON_VALIDATED = 32
    INCLUDE_INSTALLATION_TARGETS = 64
    INCLUDE_ASSET_URI = 128
    INCLUDE_STATISTICS = 256
    INCLUDE_LATEST_VERSION_ONLY = 512
    USE_FALLBACK_ASSET_URI = 1024
    INCLUDE_METADATA = 2048
    INCLUDE_MINIMAL_PAYLOAD_FOR_VS_IDE = 4096
    INCLUDE_LCIDS = 8192
    INCLUDE_SHARED_ORGANIZATIONS = 16384
    ALL_ATTRIBUTES = 16863
    INCLUDE_NAME_CONFLICT_INFO = 32768


# Flags used whenever version details are needed
VERSION_QUERY_FLAGS = (QueryFlag.INCLUDE_VERSIONS, QueryFlag.INCLUDE_FILES)


def encode_flags(flags: Iterable[int]) -> int:
    """
    Combine query flags into a single bitmask.

    Values are OR-ed together as given; values outside ``QueryFlag`` are not
    rejected.

    Parameters:
        flags (Iterable[int]): Flag values, ``QueryFlag`` members or plain ints.

    Returns:
        int: The bitwise OR of all flags, ``0`` for an empty iterable.
    """
    mask = 0
    for flag in flags:
        mask |= int(flag)
    return mask

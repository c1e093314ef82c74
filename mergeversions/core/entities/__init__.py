"""
Business entities representing core domain concepts.

Entities are mutable objects with identity that persist over time.
They encapsulate business rules and behavior.

Exports:
- MediaItem: A movie or episode with its version links
- ItemUpdateType: Kind of write sent to the library
- VersionRole: Primary / alternate / standalone role of an item
"""

from mergeversions.core.entities.media_item import (
    ItemUpdateType,
    MediaItem,
    VersionRole,
    format_item_id,
)

__all__ = [
    "ItemUpdateType",
    "MediaItem",
    "VersionRole",
    "format_item_id",
]

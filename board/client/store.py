"""Client-side record of liked items.

The record is a private hint for choosing the next like direction. It is
not a vote ledger; like counts always come from the server.
"""

from pathlib import Path
from uuid import UUID

import logfire
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from board.domain.value import ItemType

# Namespaces keep liked posts and liked comments apart in one file
NAMESPACES: dict[ItemType, str] = {
    ItemType.POST: "board_liked_posts",
    ItemType.COMMENT: "board_liked_comments",
}

_liked_items_adapter = TypeAdapter(dict[str, list[str]])


class LikedItemsStore:
    """JSON file backed membership sets of liked item ids.

    Entries never expire. Storage problems are logged and otherwise
    ignored: an unreadable file reads as "nothing liked" and a failed
    write leaves the previous file in place.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def is_liked(self, item_type: ItemType, item_id: UUID | str) -> bool:
        return str(item_id) in self.liked_ids(item_type)

    def liked_ids(self, item_type: ItemType) -> set[str]:
        return set(self._read().get(NAMESPACES[item_type], []))

    def set_liked(self, item_type: ItemType, item_id: UUID | str, liked: bool) -> None:
        """Record or forget a like. Idempotent in both directions."""
        data = self._read()
        key = NAMESPACES[item_type]
        ids = data.get(key, [])
        item = str(item_id)

        if liked and item not in ids:
            ids.append(item)
        elif not liked and item in ids:
            ids = [i for i in ids if i != item]
        else:
            return

        data[key] = ids
        self._write(data)

    def toggle(self, item_type: ItemType, item_id: UUID | str) -> bool:
        """Flip membership and return the new state."""
        liked = not self.is_liked(item_type, item_id)
        self.set_liked(item_type, item_id, liked)
        return liked

    def clear(self, item_type: ItemType | None = None) -> None:
        """Forget every like of one kind, or of all kinds."""
        if item_type is None:
            self._write({})
            return
        data = self._read()
        data.pop(NAMESPACES[item_type], None)
        self._write(data)

    def _read(self) -> dict[str, list[str]]:
        try:
            return _liked_items_adapter.validate_json(self.path.read_bytes())
        except FileNotFoundError:
            return {}
        except (OSError, PydanticValidationError) as e:
            logfire.warn(
                "Failed to read liked items",
                path=str(self.path),
                error=str(e),
                error_type=type(e).__name__,
            )
            return {}

    def _write(self, data: dict[str, list[str]]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(_liked_items_adapter.dump_json(data))
        except OSError as e:
            logfire.warn(
                "Failed to write liked items",
                path=str(self.path),
                error=str(e),
                error_type=type(e).__name__,
            )

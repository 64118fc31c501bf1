"""Unit tests for LikedItemsStore."""

import json
from uuid import uuid4

from board.client.store import LikedItemsStore
from board.domain.value import ItemType


class TestLikedItemsStore:
    """Tests for the persisted liked-ids record."""

    def test_set_and_query(self, tmp_path):
        store = LikedItemsStore(tmp_path / "liked.json")
        comment_id = uuid4()

        store.set_liked(ItemType.COMMENT, comment_id, True)

        assert store.is_liked(ItemType.COMMENT, comment_id)
        assert store.is_liked(ItemType.COMMENT, str(comment_id))
        assert not store.is_liked(ItemType.POST, comment_id)

    def test_set_liked_is_idempotent(self, tmp_path):
        path = tmp_path / "liked.json"
        store = LikedItemsStore(path)
        comment_id = uuid4()

        store.set_liked(ItemType.COMMENT, comment_id, True)
        store.set_liked(ItemType.COMMENT, comment_id, True)

        data = json.loads(path.read_text())
        assert data["board_liked_comments"] == [str(comment_id)]

    def test_toggle_returns_new_state(self, tmp_path):
        store = LikedItemsStore(tmp_path / "liked.json")
        post_id = uuid4()

        assert store.toggle(ItemType.POST, post_id) is True
        assert store.toggle(ItemType.POST, post_id) is False
        assert store.liked_ids(ItemType.POST) == set()

    def test_survives_new_instance(self, tmp_path):
        """A fresh store on the same file sees earlier likes."""
        path = tmp_path / "nested" / "liked.json"
        comment_id = uuid4()
        LikedItemsStore(path).set_liked(ItemType.COMMENT, comment_id, True)

        assert LikedItemsStore(path).is_liked(ItemType.COMMENT, comment_id)

    def test_missing_file_reads_as_nothing_liked(self, tmp_path):
        store = LikedItemsStore(tmp_path / "absent.json")

        assert store.liked_ids(ItemType.COMMENT) == set()

    def test_corrupt_file_tolerated(self, tmp_path):
        """Unreadable content reads as empty and is replaced on write."""
        path = tmp_path / "liked.json"
        path.write_text("{not json")
        store = LikedItemsStore(path)
        comment_id = uuid4()

        assert not store.is_liked(ItemType.COMMENT, comment_id)
        store.set_liked(ItemType.COMMENT, comment_id, True)
        assert store.is_liked(ItemType.COMMENT, comment_id)

    def test_wrong_shape_tolerated(self, tmp_path):
        path = tmp_path / "liked.json"
        path.write_text(json.dumps(["not", "a", "mapping"]))

        assert LikedItemsStore(path).liked_ids(ItemType.POST) == set()

    def test_unwritable_location_swallowed(self, tmp_path):
        """A write failure is logged, not raised."""
        blocker = tmp_path / "file"
        blocker.write_text("")
        store = LikedItemsStore(blocker / "liked.json")

        store.set_liked(ItemType.COMMENT, uuid4(), True)

        assert store.liked_ids(ItemType.COMMENT) == set()

    def test_clear_one_namespace(self, tmp_path):
        store = LikedItemsStore(tmp_path / "liked.json")
        post_id, comment_id = uuid4(), uuid4()
        store.set_liked(ItemType.POST, post_id, True)
        store.set_liked(ItemType.COMMENT, comment_id, True)

        store.clear(ItemType.COMMENT)

        assert store.liked_ids(ItemType.COMMENT) == set()
        assert store.is_liked(ItemType.POST, post_id)

        store.clear()
        assert store.liked_ids(ItemType.POST) == set()

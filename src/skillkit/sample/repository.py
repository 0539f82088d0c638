"""In-memory storage for the sample to-do skill."""

import threading


class ItemNotFoundError(Exception):
    """The item is not on the user's list."""


class TodoRepository:
    """
    Maps a user id to that user's list of items.

    Lambda storage is ephemeral, so a real skill would talk to a database
    here. The lock matters because one skill instance serves concurrent
    requests when running behind the HTTP listener.
    """

    def __init__(self) -> None:
        self._items: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def get_items(self, user_id: str) -> list[str]:
        with self._lock:
            return list(self._items.get(user_id, []))

    def add_item(self, user_id: str, item_name: str) -> None:
        with self._lock:
            self._items.setdefault(user_id, []).append(item_name)

    def remove_item(self, user_id: str, item_name: str) -> None:
        """Remove the first matching item (case-insensitive)."""
        with self._lock:
            items = self._items.get(user_id, [])
            for i, item in enumerate(items):
                if item.lower() == item_name.lower():
                    del items[i]
                    return
        raise ItemNotFoundError(item_name)

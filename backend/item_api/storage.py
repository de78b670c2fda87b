import threading


class ItemStore:
    """In-memory items in insertion order, keyed by a never-reused id.

    Every method takes the same lock, so a reader never sees a half-applied
    create, replace or delete. Items leave the store as copies.
    """

    def __init__(self):
        self._items = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self):
        with self._lock:
            return len(self._items)

    def list(self):
        with self._lock:
            return [dict(item) for item in self._items.values()]

    def create(self, data):
        with self._lock:
            item_id = self._next_id
            self._next_id += 1
            stored = {"id": item_id, "name": data["name"], "price": data["price"]}
            self._items[item_id] = stored
            return dict(stored)

    def get(self, item_id):
        with self._lock:
            item = self._items.get(item_id)
            return dict(item) if item is not None else None

    def replace(self, item_id, data):
        with self._lock:
            item = self._items.get(item_id)
            if item is None:
                return None
            item["name"] = data["name"]
            item["price"] = data["price"]
            return dict(item)

    def delete(self, item_id):
        with self._lock:
            return self._items.pop(item_id, None)

    def clear(self):
        # The id counter keeps running so ids stay unique for the process.
        with self._lock:
            self._items.clear()

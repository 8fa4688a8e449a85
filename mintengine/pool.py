"""A pool of objects grouped by their type."""


class ObjectPool:
    """Holds objects grouped by type, in insertion order."""

    def __init__(self):
        self._objects = {}

    def add(self, obj):
        """Store ``obj`` under its type and return it."""
        self._objects.setdefault(type(obj), []).append(obj)
        return obj

    def remove(self, obj):
        """Remove ``obj`` itself (by identity) if it is stored."""
        objects = self._objects.get(type(obj))
        if not objects:
            return
        for position, stored in enumerate(objects):
            if stored is obj:
                del objects[position]
                return

    def get(self, kind, index=0):
        """Return the stored object of ``kind`` at ``index``, or None."""
        objects = self._objects.get(kind, [])
        if -len(objects) <= index < len(objects):
            return objects[index]
        return None

    def get_all(self, kind):
        """Return a list of every stored object of ``kind``."""
        return list(self._objects.get(kind, []))

    def clear(self):
        """Drop every stored object."""
        self._objects.clear()
"""Process-wide registry of manager objects keyed by their type."""

_managers = {}


def add_manager(manager, kind=None):
    """Register ``manager`` under ``kind`` (by default its own type)."""
    if manager is None:
        raise ValueError("Manager is None")
    _managers[kind if kind is not None else type(manager)] = manager


def get_manager(kind):
    """Return the manager registered under ``kind``, or None."""
    return _managers.get(kind)


def clear_managers():
    """Remove every registered manager."""
    _managers.clear()
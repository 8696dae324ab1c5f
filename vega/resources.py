"""A keyed cache of loaded resources such as textures and fonts."""

from __future__ import annotations

from typing import Callable, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class ResourceManager(Generic[T]):
    """Loads resources by path once and hands out the cached objects.

    ``loader`` turns a path into a resource; it signals failure by raising
    ``OSError`` or ``ValueError`` or by returning ``None``.  ``empty`` is the
    placeholder returned by :meth:`get_safety` for unknown paths.
    """

    def __init__(self, loader: Callable[[str], Optional[T]], empty: T) -> None:
        self._loader = loader
        self._empty = empty
        self._resources: Dict[str, T] = {}

    def load(self, path: str) -> bool:
        """Load ``path`` into the cache.

        Returns False only when the path is already cached.  A resource that
        fails to load is not cached, yet the call still returns True.
        """
        if path in self._resources:
            return False
        try:
            resource = self._loader(path)
        except (OSError, ValueError):
            resource = None
        if resource is not None:
            self._resources[path] = resource
        return True

    def unload(self, path: str) -> bool:
        """Drop ``path`` from the cache; False if it was not cached."""
        if path not in self._resources:
            return False
        del self._resources[path]
        return True

    def unload_all(self) -> None:
        """Drop every cached resource."""
        self._resources.clear()

    def get_safety(self, path: str) -> T:
        """Return the cached resource, or the empty placeholder if missing."""
        return self._resources.get(path, self._empty)

    def get(self, path: str) -> T:
        """Return the cached resource; raise KeyError if it is not loaded."""
        try:
            return self._resources[path]
        except KeyError:
            raise KeyError(f"resource not loaded: {path}") from None

    def __contains__(self, path: object) -> bool:
        return path in self._resources

    def __len__(self) -> int:
        return len(self._resources)
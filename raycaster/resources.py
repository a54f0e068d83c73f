from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Callable, DefaultDict, List

logger = logging.getLogger(__name__)


class ResourceManager:
    """
    Tracks every buffer and timer created for a panel and releases it exactly once.

    Usage:
        res = ResourceManager()
        buf = res.gen(lambda: host.create_buffer(w, h), host.release_buffer)
        ...
        res.release(buf)
        res.shutdown()
    """

    def __init__(self) -> None:
        self._objs: DefaultDict[Callable[[Any], None], List[Any]] = defaultdict(list)

    def gen(self, creator: Callable[[], Any], releaser: Callable[[Any], None]) -> Any:
        """Create a resource and remember how to release it."""
        obj = creator()
        self._objs[releaser].append(obj)
        return obj

    def release(self, obj: Any) -> bool:
        """
        Release a single tracked resource now.
        Returns False if the object is not tracked (already released).
        """
        for releaser, objs in self._objs.items():
            for i, tracked in enumerate(objs):
                if tracked is obj:
                    del objs[i]
                    releaser(obj)
                    return True
        logger.debug("Resource %r is not tracked; nothing to release", obj)
        return False

    def tracked(self) -> int:
        """Number of resources still awaiting release."""
        return sum(len(objs) for objs in self._objs.values())

    def shutdown(self) -> None:
        """Release everything still tracked, in creation order per release callable."""
        for releaser, objs in self._objs.items():
            for obj in objs:
                releaser(obj)
        self._objs.clear()

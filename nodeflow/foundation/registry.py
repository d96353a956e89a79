"""
Node Registry: kind id -> node kind (sockets, data slots, compute).

- register(kind_id, kind), get(kind_id), schemas()
- frozen() returns an immutable snapshot; the engine only ever holds a snapshot.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional, Type, Union

from nodeflow.foundation.block import AbstractNodeKind
from nodeflow.foundation.errors import UnknownKindError

logger = logging.getLogger(__name__)


class NodeRegistry:
    """
    Maps kind id (str) to a node kind instance. A class is instantiated on registration.
    """

    _global: Optional["NodeRegistry"] = None

    def __init__(self) -> None:
        self._kinds: Dict[str, AbstractNodeKind] = {}
        self._frozen = False

    @classmethod
    def global_registry(cls) -> NodeRegistry:
        if cls._global is None:
            cls._global = cls()
        return cls._global

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    def register(
        self,
        kind_id: str,
        kind: Union[AbstractNodeKind, Type[AbstractNodeKind]],
    ) -> None:
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot register {kind_id!r}")
        if not kind_id or not kind_id.strip():
            raise ValueError("kind_id must be non-empty")
        if isinstance(kind, type):
            kind = kind()
        if not isinstance(kind, AbstractNodeKind):
            raise TypeError(f"Expected a node kind for {kind_id!r}, got {type(kind).__name__}")
        self._kinds[kind_id.strip()] = kind
        logger.debug(f"Registered node kind {kind_id!r} ({kind.input_count} in / {kind.output_count} out)")

    def get(self, kind_id: str) -> Optional[AbstractNodeKind]:
        return self._kinds.get(kind_id)

    def require(self, kind_id: str) -> AbstractNodeKind:
        """Like get(), but raises UnknownKindError for an unregistered id."""
        kind = self._kinds.get(kind_id)
        if kind is None:
            raise UnknownKindError(kind_id, list(self._kinds))
        return kind

    def kinds(self) -> Dict[str, AbstractNodeKind]:
        return dict(self._kinds)

    def schemas(self) -> Dict[str, Dict[str, Any]]:
        """Catalogue for the host palette: kind id -> schema dict."""
        return {kid: kind.schema().to_dict() for kid, kind in self._kinds.items()}

    def frozen(self) -> NodeRegistry:
        """Immutable copy of the current entries."""
        snap = NodeRegistry()
        snap._kinds = dict(self._kinds)
        snap._frozen = True
        return snap

    def __contains__(self, kind_id: str) -> bool:
        return kind_id in self._kinds

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._kinds))

    def __len__(self) -> int:
        return len(self._kinds)


def register_kind(kind_id: str, registry: Optional[NodeRegistry] = None):
    """Decorator: register a node kind class under kind_id."""
    reg = registry or NodeRegistry.global_registry()

    def decorator(cls: Type[AbstractNodeKind]) -> Type[AbstractNodeKind]:
        reg.register(kind_id, cls)
        return cls
    return decorator


def builtin_registry() -> NodeRegistry:
    """Global registry with the built-in kinds loaded."""
    import nodeflow.kinds  # noqa: F401 - registers built-in kinds
    return NodeRegistry.global_registry()

"""
mqttledger.registry  ──  Handler table keyed by operation name
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Callable, Dict, Sequence

from .errors import UnknownOperation

if TYPE_CHECKING:
    from .persistence.base import Ledger

Handler = Callable[["Ledger", Sequence[str]], bytes]


class OperationRegistry:
    """Maps operation name -> handler. Stateless apart from the table."""

    def __init__(self):
        self._handlers: Dict[str, Handler] = {}

    def register(self, name: str) -> Callable[[Handler], Handler]:
        """Decorator registering `fn` as the handler for `name`"""

        def decorator(fn: Handler) -> Handler:
            if name in self._handlers:
                raise ValueError(f"operation {name!r} already registered")
            self._handlers[name] = fn
            return fn

        return decorator

    def get(self, name: str) -> Handler:
        try:
            return self._handlers[name]
        except KeyError:
            raise UnknownOperation(name) from None

    def names(self) -> list[str]:
        return sorted(self._handlers)


# Global registry instance
_registry = OperationRegistry()

# Export the decorator interface
operation = _registry.register


def default_registry() -> OperationRegistry:
    return _registry

"""Chained variable scopes shared between the moments of a timeline.

Each serial or parallel timeline pushes one scope when it is scheduled, so
moments deeper in the tree can bind local names (e.g. "the article just
created") without clobbering their ancestors, while still reading and
mutating ancestor state such as accumulating lists.
"""

from typing import Any

from timeweave.errors import UndefinedVariable


class Scope:
    """A variable environment with parent delegation.

    ``get`` walks the chain from this scope up to the root; ``set`` always
    binds on this scope, shadowing any ancestor binding of the same name.
    """

    def __init__(self, parent: "Scope | None" = None, **bindings: Any):
        self._parent = parent
        self._bindings: dict[str, Any] = dict(bindings)

    @property
    def parent(self) -> "Scope | None":
        return self._parent

    def push(self) -> "Scope":
        """Create a child scope of this one."""
        return type(self)(self)

    def get(self, name: str) -> Any:
        """Look a name up in this scope or its nearest ancestor that binds it.

        Raises:
            UndefinedVariable: If no scope in the chain binds ``name``
        """
        scope: Scope | None = self
        while scope is not None:
            if name in scope._bindings:
                return scope._bindings[name]
            scope = scope._parent
        raise UndefinedVariable(name)

    def set(self, name: str, value: Any) -> Any:
        """Bind ``name`` on this scope and return ``value``."""
        self._bindings[name] = value
        return value

    def __getitem__(self, name: str) -> Any:
        return self.get(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        scope: Scope | None = self
        while scope is not None:
            if name in scope._bindings:
                return True
            scope = scope._parent
        return False

    def __repr__(self) -> str:
        return f"Scope({', '.join(sorted(self._bindings))})"

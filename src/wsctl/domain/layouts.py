"""Layout inheritance resolution.

Layouts form a directed graph over names via ``inherits``. Resolution is a
depth-first expansion: each parent (in listed order) is flattened first,
then the layout's own commands are appended. Diamonds are expected and the
repeated commands are kept, e.g.::

    A: [c1]
    B(A): [c2]
    C(A): [c3]
    D(B, C): [c4]   ->   [c1, c2, c1, c3, c4]

INVARIANT: a layout never reaches itself through ``inherits``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from wsctl.domain.errors import CyclicInheritanceError, DuplicateNameError, UnknownLayoutError
from wsctl.domain.types import LayoutDef, ResolvedLayout


def index_layouts(layouts: Iterable[LayoutDef]) -> dict[str, LayoutDef]:
    """Build a name-keyed map, rejecting duplicate names."""
    indexed: dict[str, LayoutDef] = {}
    for layout in layouts:
        if layout.name in indexed:
            raise DuplicateNameError("layout", layout.name)
        indexed[layout.name] = layout
    return indexed


class LayoutResolver:
    """Flattens layouts against an immutable name -> definition map.

    Fully resolved layouts are memoised by name. The cache only holds
    results for layouts in *layouts*; a definition resolved through
    :meth:`resolve_definition` is never cached since its name may shadow
    a global layout.
    """

    def __init__(self, layouts: Mapping[str, LayoutDef]) -> None:
        self._layouts = layouts
        self._cache: dict[str, tuple[str, ...]] = {}

    def resolve(self, name: str) -> ResolvedLayout:
        """Resolve the global layout *name* into a flat command list."""
        if name not in self._layouts:
            raise UnknownLayoutError(name)
        return ResolvedLayout(name=name, commands=self._expand(name, []))

    def resolve_definition(self, layout: LayoutDef) -> ResolvedLayout:
        """Resolve a layout that lives outside the global set.

        Its parents are looked up in the global set. Global layouts cannot
        name it, so it can never be part of a cycle itself; a parent with
        the same name refers to the global layout.
        """
        commands: list[str] = []
        for parent in layout.inherits:
            if parent not in self._layouts:
                raise UnknownLayoutError(parent, referenced_by=layout.name)
            commands.extend(self._expand(parent, []))
        commands.extend(layout.commands)
        return ResolvedLayout(name=layout.name, commands=tuple(commands))

    def _expand(self, name: str, stack: list[str]) -> tuple[str, ...]:
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        layout = self._layouts[name]
        stack.append(name)
        try:
            commands: list[str] = []
            for parent in layout.inherits:
                if parent in stack:
                    cycle_start = stack.index(parent)
                    raise CyclicInheritanceError([*stack[cycle_start:], parent])
                if parent not in self._layouts:
                    raise UnknownLayoutError(parent, referenced_by=name)
                commands.extend(self._expand(parent, stack))
            commands.extend(layout.commands)
        finally:
            stack.pop()

        result = tuple(commands)
        self._cache[name] = result
        return result


def resolve_layout(layout_name: str, all_layouts: Mapping[str, LayoutDef]) -> ResolvedLayout:
    """Resolve *layout_name* against *all_layouts* without keeping a cache."""
    return LayoutResolver(all_layouts).resolve(layout_name)

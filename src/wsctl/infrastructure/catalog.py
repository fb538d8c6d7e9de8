"""Catalog — the immutable set of definitions for one invocation.

The Catalog is the single dependency injected into every service. It is
built once from :class:`WsSettings`, validates name uniqueness, and then
exposes search, classification, override lookup and layout resolution
over the frozen rule and layout sets.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from wsctl.domain.errors import DuplicateNameError
from wsctl.domain.layouts import LayoutResolver, index_layouts
from wsctl.domain.types import LayoutDef, ResolvedLayout, Workspace, WorkspaceTypeRule
from wsctl.infrastructure.overrides import find_local_override
from wsctl.infrastructure.search import OnError, classify_directory, search_workspaces

if TYPE_CHECKING:
    from wsctl.config.settings import WsSettings

logger = logging.getLogger(__name__)


def build_rules(settings: WsSettings) -> tuple[WorkspaceTypeRule, ...]:
    """Convert configured workspace definitions, rejecting duplicate names."""
    rules: list[WorkspaceTypeRule] = []
    seen: set[str] = set()
    for definition in settings.workspace_definitions or ():
        if definition.name in seen:
            raise DuplicateNameError("workspace definition", definition.name)
        seen.add(definition.name)
        rules.append(definition.to_rule())
    return tuple(rules)


class Catalog:
    """Frozen workspace rules and layouts plus the operations over them."""

    def __init__(self, settings: WsSettings) -> None:
        self.settings = settings
        self.rules = build_rules(settings)
        self.layouts: dict[str, LayoutDef] = index_layouts(
            layout.to_layout() for layout in settings.layouts
        )
        self._resolver = LayoutResolver(self.layouts)
        self._rules_by_name = {rule.name: rule for rule in self.rules}

        for rule in self.rules:
            if rule.default_layout and rule.default_layout not in self.layouts:
                logger.warning(
                    "Workspace type %r names unknown default layout %r",
                    rule.name,
                    rule.default_layout,
                )

    @property
    def override_filenames(self) -> tuple[str, ...]:
        return tuple(self.settings.local.filenames)

    def rule(self, type_name: str | None) -> WorkspaceTypeRule | None:
        if type_name is None:
            return None
        return self._rules_by_name.get(type_name)

    # ------------------------------------------------------------------
    # Search & classification
    # ------------------------------------------------------------------

    def search(
        self,
        roots: list[Path] | None = None,
        *,
        on_error: OnError | None = None,
    ) -> Iterator[Workspace]:
        """Lazily search *roots* (default: configured search paths)."""
        cfg = self.settings.search
        return search_workspaces(
            roots if roots is not None else cfg.expanded_paths(),
            rules=self.rules,
            max_depth=cfg.max_depth,
            exclude_path_components=cfg.exclude_path_components,
            follow_links=cfg.follow_links,
            prune_matched=cfg.prune_matched,
            override_filenames=self.override_filenames,
            on_error=on_error,
        )

    def classify(self, path: Path) -> Workspace:
        """Classify one directory; unmatched directories get no type."""
        return classify_directory(path, self.rules, override_filenames=self.override_filenames)

    # ------------------------------------------------------------------
    # Layouts
    # ------------------------------------------------------------------

    def find_override(self, start_dir: Path) -> tuple[Path, LayoutDef] | None:
        """The closest local layout file above *start_dir* and its layout."""
        return find_local_override(start_dir, self.override_filenames)

    def resolve(self, layout_name: str) -> ResolvedLayout:
        return self._resolver.resolve(layout_name)

    def resolve_definition(self, layout: LayoutDef) -> ResolvedLayout:
        return self._resolver.resolve_definition(layout)

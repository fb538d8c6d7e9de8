"""Pydantic configuration models with code-baked defaults.

Sparse YAML contract: defaults baked here, ``wsctl.yaml`` only contains
overrides. An empty file (or no file) is a valid configuration.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from wsctl.domain.types import DEFAULT_OVERRIDE_FILENAMES, LayoutDef, WorkspaceTypeRule


# --- wsctl.yaml sections ---


class SearchConfig(BaseModel):
    """search: section."""

    model_config = {"frozen": True, "extra": "forbid"}

    paths: list[str] = Field(default_factory=lambda: ["~"])
    max_depth: int = Field(default=3, ge=0)
    exclude_path_components: list[str] = Field(default_factory=list)
    follow_links: bool = False
    prune_matched: bool = True

    def expanded_paths(self) -> list[Path]:
        """Search roots with ``~`` expanded, in configured order."""
        return [Path(p).expanduser() for p in self.paths]


class SessionConfig(BaseModel):
    """session: section."""

    model_config = {"frozen": True, "extra": "forbid"}

    name_path_components: int = Field(default=1, ge=1)


class LocalConfig(BaseModel):
    """local: section — local layout override files."""

    model_config = {"frozen": True, "extra": "forbid"}

    filenames: list[str] = Field(default_factory=lambda: list(DEFAULT_OVERRIDE_FILENAMES))


class WorkspaceDefinitionConfig(BaseModel):
    """One entry of workspace_definitions:."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(description="Workspace type name, exported as WSCTL_TYPE in the session.")
    has_any_file: list[str] | None = Field(
        default=None, description="At least one of these files must be present."
    )
    has_all_files: list[str] | None = Field(
        default=None, description="All of these files must be present."
    )
    missing_any_file: list[str] | None = Field(
        default=None, description="At least one of these files must be missing."
    )
    missing_all_files: list[str] | None = Field(
        default=None, description="All of these files must be missing."
    )
    default_layout: str | None = Field(
        default=None, description="Layout applied when no local or explicit layout is chosen."
    )

    def to_rule(self) -> WorkspaceTypeRule:
        return WorkspaceTypeRule(
            name=self.name,
            has_any_file=tuple(self.has_any_file or ()),
            has_all_files=tuple(self.has_all_files or ()),
            missing_any_file=tuple(self.missing_any_file or ()),
            missing_all_files=tuple(self.missing_all_files or ()),
            default_layout=self.default_layout,
        )


class LayoutConfig(BaseModel):
    """One entry of layouts:, also the body of a local override file."""

    model_config = {"frozen": True, "extra": "forbid"}

    name: str = Field(description="Name referenced by default_layout and inherits.")
    inherits: list[str] | None = Field(
        default=None, description="Layouts whose commands run first, in listed order."
    )
    commands: list[str] | None = Field(
        default=None, description="Commands sent verbatim to the session after inherited ones."
    )

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            msg = "layout name must not be blank"
            raise ValueError(msg)
        return value

    def to_layout(self) -> LayoutDef:
        return LayoutDef(
            name=self.name,
            inherits=tuple(self.inherits or ()),
            commands=tuple(self.commands or ()),
        )


class LocalLayoutFile(BaseModel):
    """Schema of a local override file (``.wsctl.yaml``)."""

    model_config = {"frozen": True, "extra": "forbid"}

    layout: LayoutConfig


class WsConfig(BaseModel):
    """Root configuration composing all sections of ``wsctl.yaml``."""

    model_config = {"frozen": True, "extra": "forbid"}

    search: SearchConfig = Field(default_factory=SearchConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    local: LocalConfig = Field(default_factory=LocalConfig)
    workspace_definitions: list[WorkspaceDefinitionConfig] | None = None
    layouts: list[LayoutConfig] = Field(default_factory=list)

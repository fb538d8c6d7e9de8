"""Workspace-type matching and classification.

Pure functions over the set of filenames directly inside a directory.
Rule order is priority: the first rule that matches names the type.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence

from wsctl.domain.types import (
    BUILTIN_LOCAL_TYPE,
    BUILTIN_VCS_TYPE,
    DEFAULT_OVERRIDE_FILENAMES,
    VCS_MARKERS,
    WorkspaceTypeRule,
)


def has_any_file(files: Iterable[str], present: Collection[str]) -> bool:
    """True if *files* is empty or at least one of them is present."""
    files = tuple(files)
    return not files or any(f in present for f in files)


def has_all_files(files: Iterable[str], present: Collection[str]) -> bool:
    """True if every one of *files* is present (vacuously true when empty)."""
    return all(f in present for f in files)


def missing_any_file(files: Iterable[str], present: Collection[str]) -> bool:
    """True if *files* is empty or at least one of them is absent."""
    files = tuple(files)
    return not files or any(f not in present for f in files)


def missing_all_files(files: Iterable[str], present: Collection[str]) -> bool:
    """True if every one of *files* is absent (vacuously true when empty)."""
    return all(f not in present for f in files)


def matches(rule: WorkspaceTypeRule, filenames_present: Collection[str]) -> bool:
    """Evaluate all four conditions of *rule*; the result is their conjunction."""
    return (
        has_any_file(rule.has_any_file, filenames_present)
        and has_all_files(rule.has_all_files, filenames_present)
        and missing_any_file(rule.missing_any_file, filenames_present)
        and missing_all_files(rule.missing_all_files, filenames_present)
    )


def first_match(
    filenames_present: Collection[str],
    ordered_rules: Sequence[WorkspaceTypeRule],
) -> WorkspaceTypeRule | None:
    """Return the first rule in *ordered_rules* matching *filenames_present*."""
    for rule in ordered_rules:
        if matches(rule, filenames_present):
            return rule
    return None


def classify_builtin(
    filenames_present: Collection[str],
    *,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> str | None:
    """Classify with the built-in predicates used when no rules are configured.

    A version-control root wins over a directory that only holds a local
    layout file.
    """
    if any(marker in filenames_present for marker in VCS_MARKERS):
        return BUILTIN_VCS_TYPE
    if any(name in filenames_present for name in override_filenames):
        return BUILTIN_LOCAL_TYPE
    return None


def classify_match(
    filenames_present: Collection[str],
    ordered_rules: Sequence[WorkspaceTypeRule] | None,
    *,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> tuple[str, WorkspaceTypeRule | None] | None:
    """Return the workspace type name and the rule that matched, or None.

    With no rules at all (``None`` or empty) the built-in predicates apply
    and the rule is None.
    """
    if not ordered_rules:
        type_name = classify_builtin(filenames_present, override_filenames=override_filenames)
        return (type_name, None) if type_name else None
    rule = first_match(filenames_present, ordered_rules)
    return (rule.name, rule) if rule is not None else None


def classify(
    filenames_present: Collection[str],
    ordered_rules: Sequence[WorkspaceTypeRule] | None,
    *,
    override_filenames: Iterable[str] = DEFAULT_OVERRIDE_FILENAMES,
) -> str | None:
    """Return the workspace type name for a directory, or None."""
    found = classify_match(filenames_present, ordered_rules, override_filenames=override_filenames)
    return found[0] if found else None

"""Naming-convention helpers for clothing bones and meshes."""


def normalize_suffix(raw: str) -> str:
    """
    Normalize a user-supplied naming suffix.

    Whitespace is trimmed, then trailing underscores are stripped. An empty
    result disables the suffix feature. Otherwise a single leading underscore
    is added unless one is already present, so "__cloth__" becomes "__cloth".
    """
    trimmed = raw.strip().rstrip("_")
    if not trimmed:
        return ""
    if trimmed.startswith("_"):
        return trimmed
    return "_" + trimmed


def has_suffix(name: str, suffix: str) -> bool:
    """Exact, case-sensitive trailing match. An empty suffix never matches."""
    return bool(suffix) and name.endswith(suffix)


def with_suffix(name: str, suffix: str) -> str:
    """Name a merge would give the entity: unchanged if already suffixed."""
    if not suffix or name.endswith(suffix):
        return name
    return name + suffix

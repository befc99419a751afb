"""Naming helpers shared by the analyzers and the CLI."""

from vrm_dryrun.utils.naming import has_suffix, normalize_suffix, with_suffix

__all__ = [
    "has_suffix",
    "normalize_suffix",
    "with_suffix",
]

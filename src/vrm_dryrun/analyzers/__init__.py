"""Analyzers for duplicate names, skinned-mesh references, and merge estimates."""

from vrm_dryrun.analyzers.duplicates import bone_name_set, find_duplicate_names
from vrm_dryrun.analyzers.merge import analyze, build_merge_plan
from vrm_dryrun.analyzers.skinned_mesh import (
    get_referenced_bones,
    get_unresolved_references,
)

__all__ = [
    "analyze",
    "bone_name_set",
    "build_merge_plan",
    "find_duplicate_names",
    "get_referenced_bones",
    "get_unresolved_references",
]

"""Resolve which clothing bones the skinned meshes actually reference."""

from collections.abc import Iterable

from vrm_dryrun.models import SkinnedMesh


def get_referenced_bones(
    smrs: Iterable[SkinnedMesh], clothing_names: set[str]
) -> set[str]:
    """Find clothing bones named by any mesh's root bone or bone list.

    References to names missing from the clothing skeleton are ignored. A
    bone referenced by several meshes is counted once.
    """
    referenced: set[str] = set()
    for smr in smrs:
        for name in smr.referenced_names():
            if name in clothing_names:
                referenced.add(name)
    return referenced


def get_unresolved_references(
    smrs: Iterable[SkinnedMesh], clothing_names: set[str]
) -> list[str]:
    """Names referenced by meshes but absent from the clothing skeleton, sorted."""
    missing = {
        name
        for smr in smrs
        for name in smr.referenced_names()
        if name not in clothing_names
    }
    return sorted(missing)

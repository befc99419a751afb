"""Duplicate bone name detection within a single skeleton."""

from collections import Counter
from collections.abc import Iterable

from vrm_dryrun.models import Bone


def find_duplicate_names(bones: Iterable[Bone]) -> list[str]:
    """
    Return bone names that occur more than once, sorted.

    Names are compared exactly (no case folding or trimming). Sorting keeps
    the result independent of input order.
    """
    counts = Counter(bone.name for bone in bones)
    return sorted(name for name, count in counts.items() if count > 1)


def bone_name_set(bones: Iterable[Bone]) -> set[str]:
    """Distinct bone names, for membership tests."""
    return {bone.name for bone in bones}

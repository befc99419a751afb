"""Dry-run estimation of a clothing-onto-avatar skeleton merge."""

from vrm_dryrun.analyzers.duplicates import bone_name_set, find_duplicate_names
from vrm_dryrun.analyzers.skinned_mesh import (
    get_referenced_bones,
    get_unresolved_references,
)
from vrm_dryrun.models import AnalysisInput, AnalysisReport, MergePlan
from vrm_dryrun.utils.constants import (
    WARN_AVATAR_DUPLICATES,
    WARN_CLOTHING_DUPLICATES,
    WARN_NO_SKINNED_MESHES,
)
from vrm_dryrun.utils.naming import has_suffix, normalize_suffix, with_suffix


def analyze(data: AnalysisInput) -> AnalysisReport:
    """
    Estimate what merging the clothing skeleton onto the avatar would do.

    Pure and total: any input, including empty collections and an empty
    suffix, produces a report. Equal inputs give equal reports.

    - Moved bones: referenced clothing bones whose name exists on the avatar.
    - Moved meshes: every clothing mesh.
    - Renamed bones/meshes: referenced bones and meshes whose name lacks the
      normalized suffix (zero when the suffix is empty).
    """
    avatar_duplicates = find_duplicate_names(data.avatar_bones)
    clothing_duplicates = find_duplicate_names(data.clothing_bones)

    avatar_names = bone_name_set(data.avatar_bones)
    referenced = get_referenced_bones(
        data.clothing_smrs, bone_name_set(data.clothing_bones)
    )

    suffix = normalize_suffix(data.suffix)
    if suffix:
        renamed_bones = sum(1 for name in referenced if not has_suffix(name, suffix))
        renamed_smrs = sum(
            1 for smr in data.clothing_smrs if not has_suffix(smr.name, suffix)
        )
    else:
        renamed_bones = renamed_smrs = 0

    warnings: list[str] = []
    if avatar_duplicates:
        warnings.append(WARN_AVATAR_DUPLICATES)
    if clothing_duplicates:
        warnings.append(WARN_CLOTHING_DUPLICATES)
    if not data.clothing_smrs:
        warnings.append(WARN_NO_SKINNED_MESHES)

    return AnalysisReport(
        duplicate_avatar_bone_names=tuple(avatar_duplicates),
        duplicate_clothing_bone_names=tuple(clothing_duplicates),
        referenced_clothing_bones=len(referenced),
        estimated_moved_bones=len(referenced & avatar_names),
        estimated_moved_smrs=len(data.clothing_smrs),
        estimated_renamed_bones=renamed_bones,
        estimated_renamed_smrs=renamed_smrs,
        warnings=tuple(warnings),
    )


def build_merge_plan(data: AnalysisInput) -> MergePlan:
    """List the bones and meshes a merge would move or rename.

    Counts agree with :func:`analyze`. Unresolved references are listed for
    information only; they never produce a report warning.
    """
    clothing_names = bone_name_set(data.clothing_bones)
    referenced = get_referenced_bones(data.clothing_smrs, clothing_names)
    suffix = normalize_suffix(data.suffix)

    renamed_bones: list[tuple[str, str]] = []
    renamed_smrs: list[tuple[str, str]] = []
    if suffix:
        renamed_bones = [
            (name, with_suffix(name, suffix))
            for name in sorted(referenced)
            if not has_suffix(name, suffix)
        ]
        renamed_smrs = [
            (smr.name, with_suffix(smr.name, suffix))
            for smr in data.clothing_smrs
            if not has_suffix(smr.name, suffix)
        ]

    return MergePlan(
        suffix=suffix,
        moved_bones=tuple(sorted(referenced & bone_name_set(data.avatar_bones))),
        renamed_bones=tuple(renamed_bones),
        renamed_smrs=tuple(renamed_smrs),
        unresolved_references=tuple(
            get_unresolved_references(data.clothing_smrs, clothing_names)
        ),
    )

"""
VRM Clothing Merge Dry-Run
==========================
Estimates what merging a clothing skeleton onto an avatar skeleton would do,
without touching any scene.

Reports:
- Duplicate bone names on the avatar and on the clothing
- Clothing bones actually referenced by skinned meshes
- Bones that collide with an avatar bone (would be merged/moved)
- Skinned meshes that would move with the clothing
- Bones and meshes that still need the naming suffix

Usage:
    CLI:
        vrm-dryrun input.json -o report.json
        vrm-dryrun duplicates input.json
        vrm-dryrun plan input.json --suffix _cloth

    Python:
        from vrm_dryrun import AnalysisInput, analyze
        report = analyze(AnalysisInput.from_dict(record))
"""

from importlib.metadata import PackageNotFoundError, version

from vrm_dryrun.analyzers import analyze, build_merge_plan
from vrm_dryrun.cli import main
from vrm_dryrun.models import (
    AnalysisInput,
    AnalysisReport,
    Bone,
    MergePlan,
    SkinnedMesh,
)

try:
    __version__ = version("vrm-dryrun")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "AnalysisInput",
    "AnalysisReport",
    "Bone",
    "MergePlan",
    "SkinnedMesh",
    "analyze",
    "build_merge_plan",
    "main",
]

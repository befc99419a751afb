"""
Pytest fixtures for merge dry-run tests.

Inputs are plain dataclass snapshots; no scene or engine is needed.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vrm_dryrun.models import AnalysisInput, Bone, SkinnedMesh
from vrm_dryrun.utils.logging import set_quiet


@pytest.fixture(autouse=True)
def reset_quiet() -> None:
    """Each test starts with logging enabled."""
    set_quiet(False)


@pytest.fixture
def jacket_input() -> AnalysisInput:
    """Avatar Hips/Spine, clothing Spine/Chest, one Jacket mesh on both."""
    return AnalysisInput(
        avatar_bones=(Bone("Hips"), Bone("Spine", "Hips")),
        clothing_bones=(Bone("Spine"), Bone("Chest", "Spine")),
        clothing_smrs=(
            SkinnedMesh("Jacket", root_bone="Spine", bones=("Spine", "Chest")),
        ),
        suffix="_cloth",
    )


@pytest.fixture
def duplicate_clothing_input() -> AnalysisInput:
    """Clothing with a duplicated bone name and no meshes."""
    return AnalysisInput(
        clothing_bones=(Bone("A"), Bone("A")),
        suffix="",
    )


@pytest.fixture
def jacket_record(jacket_input: AnalysisInput) -> dict[str, object]:
    return jacket_input.to_dict()


@pytest.fixture
def input_file(tmp_path: Path, jacket_record: dict[str, object]) -> Path:
    """Jacket input written as a JSON file."""
    path = tmp_path / "vrm_input.json"
    path.write_text(json.dumps(jacket_record), encoding="utf-8")
    return path

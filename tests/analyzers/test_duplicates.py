"""Tests for duplicate bone name detection."""

from vrm_dryrun.models import Bone


def _bones(*names: str) -> list[Bone]:
    return [Bone(name) for name in names]


class TestFindDuplicateNames:
    """Tests for find_duplicate_names function."""

    def test_no_bones(self) -> None:
        """Empty skeleton has no duplicates."""
        from vrm_dryrun.analyzers import find_duplicate_names

        assert find_duplicate_names([]) == []

    def test_unique_names(self) -> None:
        """Names occurring once never appear."""
        from vrm_dryrun.analyzers import find_duplicate_names

        assert find_duplicate_names(_bones("Hips", "Spine", "Chest")) == []

    def test_detects_exact_duplicates(self) -> None:
        """Names occurring more than once are reported once each."""
        from vrm_dryrun.analyzers import find_duplicate_names

        bones = _bones("Spine", "Hips", "Spine", "Spine", "Hips", "Head")
        assert find_duplicate_names(bones) == ["Hips", "Spine"]

    def test_sorted_regardless_of_input_order(self) -> None:
        """Output order doesn't depend on input order."""
        from vrm_dryrun.analyzers import find_duplicate_names

        forward = _bones("b", "a", "c", "a", "b", "c")
        backward = list(reversed(forward))
        assert find_duplicate_names(forward) == ["a", "b", "c"]
        assert find_duplicate_names(backward) == ["a", "b", "c"]

    def test_comparison_is_exact(self) -> None:
        """Case and surrounding whitespace make names distinct."""
        from vrm_dryrun.analyzers import find_duplicate_names

        assert find_duplicate_names(_bones("Spine", "spine", "Spine ", " Spine")) == []

    def test_parent_is_ignored(self) -> None:
        """Same name with different parents is still a duplicate."""
        from vrm_dryrun.analyzers import find_duplicate_names

        bones = [Bone("Hand", "ArmL"), Bone("Hand", "ArmR")]
        assert find_duplicate_names(bones) == ["Hand"]


class TestBoneNameSet:
    """Tests for bone_name_set function."""

    def test_collapses_duplicates(self) -> None:
        """A name repeated three times contributes one entry."""
        from vrm_dryrun.analyzers import bone_name_set

        assert bone_name_set(_bones("A", "A", "A", "B")) == {"A", "B"}

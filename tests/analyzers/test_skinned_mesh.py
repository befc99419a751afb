"""Tests for skinned mesh bone reference resolution."""

from vrm_dryrun.models import SkinnedMesh


class TestGetReferencedBones:
    """Tests for get_referenced_bones function."""

    def test_no_meshes(self) -> None:
        """No meshes means no referenced bones."""
        from vrm_dryrun.analyzers import get_referenced_bones

        assert get_referenced_bones([], {"Spine"}) == set()

    def test_root_and_bone_list(self) -> None:
        """Both root bone and bone list entries count as references."""
        from vrm_dryrun.analyzers import get_referenced_bones

        smr = SkinnedMesh("Skirt", root_bone="Hips", bones=("Leg",))
        assert get_referenced_bones([smr], {"Hips", "Leg", "Tail"}) == {"Hips", "Leg"}

    def test_missing_bones_ignored(self) -> None:
        """References to names outside the clothing skeleton are dropped."""
        from vrm_dryrun.analyzers import get_referenced_bones

        smr = SkinnedMesh("Hat", root_bone="Head", bones=("Head", "Ghost"))
        assert get_referenced_bones([smr], {"Spine"}) == set()

    def test_shared_bone_counted_once(self) -> None:
        """A bone referenced by many meshes is one entry."""
        from vrm_dryrun.analyzers import get_referenced_bones

        smrs = [SkinnedMesh(f"Part{i}", root_bone="Spine") for i in range(5)]
        assert get_referenced_bones(smrs, {"Spine"}) == {"Spine"}

    def test_no_root_bone(self) -> None:
        """A mesh without a root bone still contributes its bone list."""
        from vrm_dryrun.analyzers import get_referenced_bones

        smr = SkinnedMesh("Gloves", bones=("HandL", "HandR"))
        assert get_referenced_bones([smr], {"HandL", "HandR"}) == {"HandL", "HandR"}


class TestGetUnresolvedReferences:
    """Tests for get_unresolved_references function."""

    def test_lists_missing_sorted(self) -> None:
        """Missing names are listed once, sorted."""
        from vrm_dryrun.analyzers import get_unresolved_references

        smrs = [
            SkinnedMesh("A", root_bone="Zed", bones=("Spine", "Ghost")),
            SkinnedMesh("B", bones=("Ghost",)),
        ]
        assert get_unresolved_references(smrs, {"Spine"}) == ["Ghost", "Zed"]

    def test_all_resolved(self) -> None:
        from vrm_dryrun.analyzers import get_unresolved_references

        smr = SkinnedMesh("A", root_bone="Spine", bones=("Spine",))
        assert get_unresolved_references([smr], {"Spine"}) == []

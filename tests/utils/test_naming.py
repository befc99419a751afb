"""Tests for naming helper functions."""

import pytest


class TestNormalizeSuffix:
    """Tests for normalize_suffix function."""

    def test_adds_leading_underscore(self) -> None:
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix("cloth") == "_cloth"

    def test_keeps_existing_underscore(self) -> None:
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix("_cloth") == "_cloth"

    def test_strips_whitespace_and_trailing_underscores(self) -> None:
        """Leading underscores survive; trailing ones don't."""
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix("  __cloth__  ") == "__cloth"
        assert normalize_suffix("cloth___") == "_cloth"
        assert normalize_suffix("\tcloth\n") == "_cloth"

    def test_internal_underscores_kept(self) -> None:
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix("my_cloth_v2") == "_my_cloth_v2"

    def test_whitespace_inside_underscores_kept(self) -> None:
        """Only the outer whitespace is trimmed, before the underscore strip."""
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix("cloth_ _") == "_cloth_ "

    @pytest.mark.parametrize("raw", ["", "   ", "_", "____", "  __  "])
    def test_disabled(self, raw: str) -> None:
        """Empty, blank, and all-underscore input disables the suffix."""
        from vrm_dryrun.utils import normalize_suffix

        assert normalize_suffix(raw) == ""

    @pytest.mark.parametrize("raw", ["cloth", "__cloth__", " _a_b_ ", "x"])
    def test_idempotent(self, raw: str) -> None:
        from vrm_dryrun.utils import normalize_suffix

        once = normalize_suffix(raw)
        assert normalize_suffix(once) == once


class TestSuffixHelpers:
    """Tests for has_suffix and with_suffix."""

    def test_has_suffix(self) -> None:
        from vrm_dryrun.utils import has_suffix

        assert has_suffix("Spine_cloth", "_cloth")
        assert not has_suffix("Spine_Cloth", "_cloth")
        assert not has_suffix("Spine", "")

    def test_with_suffix(self) -> None:
        from vrm_dryrun.utils import with_suffix

        assert with_suffix("Spine", "_cloth") == "Spine_cloth"
        assert with_suffix("Spine_cloth", "_cloth") == "Spine_cloth"
        assert with_suffix("Spine", "") == "Spine"

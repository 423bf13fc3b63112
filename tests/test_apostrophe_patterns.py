"""
Unit tests for apostrophe pattern detection.
"""

import pytest

from dofus_linker.slugs import ApostrophePattern, detect_apostrophe_pattern


class TestDetectApostrophePattern:
    """Test the ordered pattern checks."""

    @pytest.mark.parametrize("name", [
        "On recherche Ka'Youloud",
        "ON RECHERCHE le Shushu Debruk'Sayl",
        "On m'appelle Wabbit",
    ])
    def test_keep_all_hyphens(self, name: str) -> None:
        assert detect_apostrophe_pattern(name) == ApostrophePattern.KEEP_ALL_HYPHENS

    @pytest.mark.parametrize("name", [
        "Carte d'identité",
        "Le château d'Allister",
        "Gros Œuvre au Château d'Allister",
    ])
    def test_keep_d_hyphen(self, name: str) -> None:
        assert detect_apostrophe_pattern(name) == ApostrophePattern.KEEP_D_HYPHEN_ONLY

    @pytest.mark.parametrize("name", [
        "Apprentissage : La Voie Sombre",
        "Apprentissage : Maître de la Douleur",
        "Apprentissage : Désespoir",
    ])
    def test_apprentissage_double(self, name: str) -> None:
        assert detect_apostrophe_pattern(name) == ApostrophePattern.APPRENTISSAGE_DOUBLE

    @pytest.mark.parametrize("name", [
        "Apprentissage : Surineur",
        "Le Mort dans l'Âme",
        "Sombre apprentissage : douleur",
        "",
    ])
    def test_standard(self, name: str) -> None:
        assert detect_apostrophe_pattern(name) == ApostrophePattern.STANDARD

    def test_first_match_wins(self) -> None:
        # Both an "on recherche" prefix and a d'identité marker
        assert (
            detect_apostrophe_pattern("On recherche une carte d'identité")
            == ApostrophePattern.KEEP_ALL_HYPHENS
        )

    def test_marker_before_apprentissage(self) -> None:
        assert (
            detect_apostrophe_pattern("Apprentissage : Sombre d'Allister")
            == ApostrophePattern.KEEP_D_HYPHEN_ONLY
        )

    def test_prefix_must_start_the_name(self) -> None:
        assert detect_apostrophe_pattern("Quand on recherche") == ApostrophePattern.STANDARD

    def test_deterministic(self) -> None:
        name = "On m'appelle Wabbit"
        assert detect_apostrophe_pattern(name) is detect_apostrophe_pattern(name)

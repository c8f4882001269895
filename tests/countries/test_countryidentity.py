"""Tests for country name and ISO code resolution."""

import pytest

from worldmapidentity.countries import (
    country_catalog,
    match_country,
    normalize_code,
    resolve,
    resolve_many,
)


class TestResolve:
    """Static lookup of free-text names"""

    @pytest.mark.parametrize("name,expected", [
        ("United States of America", "USA"),
        ("United States", "USA"),
        ("Great Britain", "GBR"),
        ("United Kingdom", "GBR"),
        ("Republic of Korea", "KOR"),
        ("South Korea", "KOR"),
        ("North Korea", "PRK"),
        ("Taiwan", "TWN"),
        ("Hong Kong", "HKG"),
        ("Holland", "NLD"),
        ("Germany", "DEU"),
        ("Côte d'Ivoire", "CIV"),
        ("Cote d'Ivoire", "CIV"),
        ("Dem. Rep. Congo", "COD"),
    ])
    def test_known_names(self, name, expected):
        assert resolve(name) == expected

    def test_pycountry_official_names(self):
        """Names not in the alias file come from pycountry"""
        assert resolve("Korea, Republic of") == "KOR"
        assert resolve("Mongolia") == "MNG"

    def test_normalization(self):
        """Trim, lowercase, collapse whitespace"""
        assert resolve("  united   STATES  of america ") == "USA"
        assert resolve("great\tbritain") == "GBR"

    def test_curly_apostrophe(self):
        assert resolve("People’s Republic of China") == "CHN"

    @pytest.mark.parametrize("name", ["", "   ", None, "Atlantis", "Untied States"])
    def test_unknown_returns_none(self, name):
        """No fuzzy fallback in resolve()"""
        assert resolve(name) is None

    def test_deterministic(self):
        assert resolve("Republic of Korea") == resolve("Republic of Korea")

    def test_resolve_many(self):
        assert resolve_many(["France", "Narnia", "UK"]) == ["FRA", None, "GBR"]

    def test_catalog_is_cached(self):
        assert country_catalog() is country_catalog()


class TestNormalizeCode:
    """ISO code variants fold to alpha-3"""

    @pytest.mark.parametrize("code,expected", [
        ("KOR", "KOR"),
        ("kor", "KOR"),
        ("KR", "KOR"),
        ("410", "KOR"),
        (410, "KOR"),
        ("156", "CHN"),
        ("4", "AFG"),
        ("TW", "TWN"),
        ("XK", "XKX"),
    ])
    def test_variants(self, code, expected):
        assert normalize_code(code) == expected

    @pytest.mark.parametrize("code", [None, "", "-99", "  ", "ZZ", "999", "TOOLONG"])
    def test_absent(self, code):
        assert normalize_code(code) is None

    def test_unknown_alpha3_kept(self):
        """User-assigned three-letter map codes survive uppercased"""
        assert normalize_code("kos") == "KOS"


class TestMatchCountry:
    """Top-K fuzzy candidates"""

    def test_typo_top_candidate(self):
        results = match_country("Untied States", k=3)
        assert results
        assert results[0]["code"] == "USA"

    def test_unique_codes(self):
        results = match_country("korea", k=5)
        codes = [r["code"] for r in results]
        assert len(codes) == len(set(codes))
        assert len(results) <= 5

    def test_sorted_scores(self):
        results = match_country("france", k=5)
        scores = [r["score"] for r in results]
        assert scores == sorted(scores, reverse=True)
        assert results[0]["code"] == "FRA"

    def test_empty_query(self):
        assert match_country("") == []

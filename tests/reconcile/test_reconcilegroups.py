"""Tests for group primaries, tooltip labels and the sidebar list."""

from worldmapidentity.models import CanonicalCountry
from worldmapidentity.reconcile import (
    display_name_for,
    group_primaries,
    primary_for,
    sidebar_countries,
)

CHN = CanonicalCountry(code="CHN", name="China", group="china")
TWN = CanonicalCountry(code="TWN", name="Taiwan", group="china")
HKG = CanonicalCountry(code="HKG", name="Hong Kong", group="china")
FRA = CanonicalCountry(code="FRA", name="France")
BEL = CanonicalCountry(code="BEL", name="belgium")
NOR = CanonicalCountry(code="NOR", name="Norway", group="nordic")
SWE = CanonicalCountry(code="SWE", name="Sweden", group="nordic")


class TestGroupPrimaries:

    def test_anchor_wins_regardless_of_order(self):
        assert group_primaries([TWN, HKG, CHN])["china"] is CHN
        assert group_primaries([CHN, TWN])["china"] is CHN

    def test_first_member_without_anchor(self):
        assert group_primaries([SWE, NOR])["nordic"] is SWE

    def test_custom_anchors(self):
        assert group_primaries([SWE, NOR], anchors={"nordic": "NOR"})["nordic"] is NOR
        assert group_primaries([TWN, CHN], anchors={})["china"] is TWN

    def test_missing_anchor_member(self):
        assert group_primaries([TWN, HKG])["china"] is TWN

    def test_ungrouped_ignored(self):
        assert group_primaries([FRA, BEL]) == {}


class TestDisplayNames:

    def test_grouped_member_shows_primary(self):
        countries = [TWN, CHN, FRA]
        assert primary_for(TWN, countries) is CHN
        assert display_name_for(TWN, countries) == "China"

    def test_ungrouped_shows_itself(self):
        assert display_name_for(FRA, [TWN, CHN, FRA]) == "France"


class TestSidebarCountries:

    def test_one_entry_per_group(self):
        entries = sidebar_countries([TWN, HKG, CHN, FRA, NOR, SWE])
        assert [c.code for c in entries] == ["CHN", "FRA", "NOR"]

    def test_sorted_case_insensitively(self):
        entries = sidebar_countries([FRA, BEL])
        assert [c.name for c in entries] == ["belgium", "France"]

    def test_duplicate_codes_collapsed(self):
        duplicate = CanonicalCountry(code="FRA", name="France (Paris)")
        entries = sidebar_countries([FRA, duplicate])
        assert [c.name for c in entries] == ["France"]

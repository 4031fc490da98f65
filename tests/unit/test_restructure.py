"""Unit tests for restructure_festivals."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from festival_organizer.models.festival import RawBand, RawFestival
from festival_organizer.models.hierarchy import Band, Festival, RecordLabel
from festival_organizer.services.output_formatter import format_hierarchy_lines
from festival_organizer.services.restructure import restructure_festivals
from tests.conftest import EXPECTED_RECORD_LABELS


def _festival(name: str, *bands: tuple[str, str]) -> RawFestival:
    return RawFestival(
        name=name,
        bands=[RawBand(name=band, record_label=label) for band, label in bands],
    )


class TestRestructureFestivals:
    def test_record_labels_sorted(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)
        assert [label.name for label in hierarchy] == EXPECTED_RECORD_LABELS

    def test_fourth_woman_records(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)

        label = hierarchy[3]
        assert label.name == "Fourth Woman Records"
        assert list(label.bands) == ["Jill Black", "The Black Dashes"]
        assert list(label.bands["Jill Black"].festivals) == ["LOL-palooza"]
        assert label.bands["Jill Black"].festivals["LOL-palooza"] == Festival(name="LOL-palooza")
        assert list(label.bands["The Black Dashes"].festivals) == ["Small Night In"]

    def test_missing_label_grouped_under_empty_name(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)

        unlabelled = hierarchy[0]
        assert unlabelled.name == ""
        assert list(unlabelled.bands) == ["Squint-281", "Winter Primates"]
        assert list(unlabelled.bands["Squint-281"].festivals) == ["Twisted Tour"]

    def test_unnamed_festival_kept_under_empty_name(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)

        acr = next(label for label in hierarchy if label.name == "ACR")
        assert list(acr.bands["Critter Girls"].festivals) == [""]
        assert list(acr.bands["Manish Ditch"].festivals) == ["Trainerella"]

    def test_every_level_sorted(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)

        for label in hierarchy:
            band_names = list(label.bands)
            assert band_names == sorted(band_names)
            for band in label.bands.values():
                festival_names = list(band.festivals)
                assert festival_names == sorted(festival_names)

    def test_band_on_two_labels_appears_under_both(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)
        by_name = {label.name: label for label in hierarchy}

        assert list(by_name["Marner Sis. Recording"].bands["Wild Antelope"].festivals) == ["Small Night In"]
        assert list(by_name["Still Bottom Records"].bands["Wild Antelope"].festivals) == ["Trainerella"]

    def test_band_festivals_merged_across_festivals(self) -> None:
        festivals = [
            _festival("Zeta Fest", ("Band A", "Label")),
            _festival("Alpha Fest", ("Band A", "Label"), ("Band B", "Label")),
        ]

        hierarchy = restructure_festivals(festivals)

        assert len(hierarchy) == 1
        assert hierarchy[0] == RecordLabel(
            name="Label",
            bands={
                "Band A": Band(
                    name="Band A",
                    festivals={
                        "Alpha Fest": Festival(name="Alpha Fest"),
                        "Zeta Fest": Festival(name="Zeta Fest"),
                    },
                ),
                "Band B": Band(name="Band B", festivals={"Alpha Fest": Festival(name="Alpha Fest")}),
            },
        )
        assert list(hierarchy[0].bands["Band A"].festivals) == ["Alpha Fest", "Zeta Fest"]

    def test_duplicate_triples_collapse(self) -> None:
        festivals = [
            _festival("Fest", ("Band", "Label"), ("Band", "Label")),
            _festival("Fest", ("Band", "Label")),
        ]

        hierarchy = restructure_festivals(festivals)

        assert list(hierarchy[0].bands) == ["Band"]
        assert list(hierarchy[0].bands["Band"].festivals) == ["Fest"]

    def test_ordinal_ordering(self) -> None:
        festivals = [_festival("F", ("b", "lower"), ("B", "Upper"), ("x", ""))]

        hierarchy = restructure_festivals(festivals)

        assert [label.name for label in hierarchy] == ["", "Upper", "lower"]

    def test_idempotent(self, sample_festivals) -> None:
        first = restructure_festivals(sample_festivals)
        second = restructure_festivals(sample_festivals)

        assert first == second
        # Mapping equality ignores order, so compare the flattened traversal too.
        assert format_hierarchy_lines(first) == format_hierarchy_lines(second)

    def test_input_order_irrelevant(self, sample_festivals) -> None:
        reversed_input = restructure_festivals(list(reversed(sample_festivals)))
        assert format_hierarchy_lines(reversed_input) == format_hierarchy_lines(
            restructure_festivals(sample_festivals)
        )

    @pytest.mark.parametrize("festivals", [None, []])
    def test_empty_input(self, festivals) -> None:
        assert restructure_festivals(festivals) == ()

    def test_festival_without_bands_contributes_nothing(self) -> None:
        festivals = [_festival("Empty Fest"), _festival("Fest", ("Band", "Label"))]

        hierarchy = restructure_festivals(festivals)

        assert [label.name for label in hierarchy] == ["Label"]

    def test_hierarchy_is_immutable(self, sample_festivals) -> None:
        hierarchy = restructure_festivals(sample_festivals)
        fourth_woman = hierarchy[3]

        assert isinstance(hierarchy, tuple)
        with pytest.raises(ValidationError):
            fourth_woman.name = "Renamed"
        with pytest.raises(AttributeError):
            fourth_woman.bands.clear()
        with pytest.raises(TypeError):
            fourth_woman.bands["Zzz"] = None
        with pytest.raises(TypeError):
            del fourth_woman.bands["Jill Black"].festivals["LOL-palooza"]

        assert list(fourth_woman.bands) == ["Jill Black", "The Black Dashes"]
        assert list(fourth_woman.bands["Jill Black"].festivals) == ["LOL-palooza"]

    def test_models_built_from_plain_dicts_are_read_only(self) -> None:
        source = {"Fest": Festival(name="Fest")}
        band = Band(name="Band", festivals=source)

        source["Other"] = Festival(name="Other")

        assert list(band.festivals) == ["Fest"]
        with pytest.raises(TypeError):
            Band(name="Empty").festivals["x"] = Festival(name="x")

"""Tests for geo value types and their decoders."""
import pytest

from placenotes.geo.models import (
    CircleFilter,
    CityResult,
    ExternalLocation,
    LocationCategory,
    RectangleFilter,
)


class TestFilters:
    """Filters render the service's filter syntax."""

    def test_circle(self):
        assert CircleFilter(151.2006, -33.8837, 5000).to_query() == "circle:151.2006,-33.8837,5000"

    def test_rectangle(self):
        assert RectangleFilter(1.0, 2.0, 3.5, 4.5).to_query() == "rect:1.0,2.0,3.5,4.5"


class TestLocationCategory:
    """Test LocationCategory lookups."""

    def test_nineteen_categories(self):
        assert len(LocationCategory) == 19

    def test_from_service_key(self):
        assert LocationCategory.from_value("commercial.food_and_drink") is LocationCategory.FOOD_AND_DRINK

    def test_from_member_name(self):
        assert LocationCategory.from_value("food_and_drink") is LocationCategory.FOOD_AND_DRINK
        assert LocationCategory.from_value("Tourism") is LocationCategory.TOURISM

    def test_unknown(self):
        with pytest.raises(ValueError):
            LocationCategory.from_value("spaceport")


class TestExternalLocationFromFeature:
    """Test ExternalLocation.from_feature()."""

    def test_decodes_properties(self):
        feature = {
            "type": "Feature",
            "properties": {
                "name": "Opera Bar",
                "categories": ["catering", "catering.bar"],
                "lat": -33.8587,
                "lon": 151.2140,
                "country": "Australia",
                "formatted": "ignored",
            },
        }

        location = ExternalLocation.from_feature(feature)

        assert location == ExternalLocation(
            "Opera Bar", ("catering", "catering.bar"), -33.8587, 151.2140, "Australia"
        )

    def test_missing_name_skipped(self):
        assert ExternalLocation.from_feature({"properties": {"lat": 1, "lon": 2}}) is None

    def test_missing_coordinates_skipped(self):
        assert ExternalLocation.from_feature({"properties": {"name": "A", "lat": 1}}) is None

    def test_not_a_feature(self):
        assert ExternalLocation.from_feature({"geometry": {}}) is None
        assert ExternalLocation.from_feature("junk") is None

    def test_defaults_for_optional_fields(self):
        location = ExternalLocation.from_feature({"properties": {"name": "A", "lat": 1, "lon": 2}})
        assert location.categories == ()
        assert location.country == ""

    def test_constructor_trims_name(self):
        location = ExternalLocation(" Cafe  ", ("catering.cafe",), 1.0, 2.0)
        assert location.name == "Cafe"


class TestCityResultFromFeature:
    """Test CityResult.from_feature()."""

    def test_decodes_properties(self):
        feature = {"properties": {"city": "Sydney", "lat": -33.86, "lon": 151.2, "country": "Australia"}}

        city = CityResult.from_feature(feature)

        assert city == CityResult("Sydney", -33.86, 151.2, "Australia")
        assert str(city) == "Sydney, Australia"

    def test_long_coordinate_keys(self):
        feature = {"properties": {"city": "Perth", "latitude": -31.95, "longitude": 115.86}}
        assert CityResult.from_feature(feature).latitude == -31.95

    def test_feature_without_city_skipped(self):
        assert CityResult.from_feature({"properties": {"lat": 0, "lon": 0}}) is None

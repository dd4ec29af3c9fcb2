import math

import pytest

from domain.distance import (
    DistanceResult,
    distance,
    distance_miles,
    format_distance,
    is_displayable,
    to_miles,
)
from domain.models import Coordinate, DistanceUnit

SAN_FRANCISCO = Coordinate(37.7749, -122.4194)
LOS_ANGELES = Coordinate(34.0522, -118.2437)


class TestHaversine:
    def test_zero_distance(self):
        assert distance(SAN_FRANCISCO, SAN_FRANCISCO) == 0

    def test_symmetric(self):
        a = Coordinate(52.520008, 13.404954)
        b = Coordinate(48.856613, 2.352222)
        assert distance(a, b) == pytest.approx(distance(b, a), rel=1e-9)

    def test_quarter_great_circle_on_equator(self):
        expected = 6371.0 * math.pi / 2
        assert distance(Coordinate(0, 0), Coordinate(0, 90)) == pytest.approx(expected)
        assert expected == pytest.approx(10007.5, abs=0.1)

    def test_known_distance(self):
        # San Francisco -> Los Angeles is roughly 559 km on a 6371 km sphere
        assert abs(distance(SAN_FRANCISCO, LOS_ANGELES) - 559) < 2

    def test_continuous_across_antimeridian(self):
        west = Coordinate(0, 179.9)
        east = Coordinate(0, -179.9)
        assert distance(west, east) == pytest.approx(distance(Coordinate(0, 0), Coordinate(0, 0.2)))

    def test_antipodal_points(self):
        assert distance(Coordinate(0, 0), Coordinate(0, 180)) == pytest.approx(6371.0 * math.pi)
        assert distance(Coordinate(90, 0), Coordinate(-90, 0)) == pytest.approx(6371.0 * math.pi)

    def test_never_negative(self):
        points = [Coordinate(lat, lon) for lat in (-90, -45, 0, 45, 90) for lon in (-180, -30, 0, 60, 180)]
        assert all(distance(a, b) >= 0 for a in points for b in points)

    def test_nan_propagates(self):
        assert math.isnan(distance(Coordinate(math.nan, 0), SAN_FRANCISCO))

    def test_infinity_becomes_nan(self):
        assert math.isnan(distance(Coordinate(0, math.inf), SAN_FRANCISCO))

    def test_out_of_range_latitudes_do_not_raise(self):
        pairs = [
            (Coordinate(-390, 0), Coordinate(-150, 180)),
            (Coordinate(-380, 0), Coordinate(200, 180)),
        ]
        for a, b in pairs:
            km = distance(a, b)
            assert isinstance(km, float)
            assert 0 <= km <= 6371.0 * math.pi

    def test_out_of_range_sweep_never_raises(self):
        for lat1 in range(-400, 401, 10):
            for lat2 in range(-400, 401, 10):
                for lon in (0, 90, 180, 270):
                    assert distance(Coordinate(lat1, 0), Coordinate(lat2, lon)) >= 0

    def test_miles(self):
        km = distance(SAN_FRANCISCO, LOS_ANGELES)
        assert distance_miles(SAN_FRANCISCO, LOS_ANGELES) == pytest.approx(km * 0.621371)
        assert to_miles(10) == pytest.approx(6.21371)


class TestFormatDistance:
    def test_metric_below_one_km_uses_meters(self):
        assert format_distance(0.5, "metric") == "500 m"

    def test_metric_one_decimal_km(self):
        assert format_distance(1.5, "metric") == "1.5 km"
        assert format_distance(12.345) == "12.3 km"

    def test_imperial_below_one_mile_uses_feet(self):
        assert format_distance(1.5, "imperial") == "4921 ft"

    def test_imperial_one_decimal_miles(self):
        assert format_distance(10, DistanceUnit.IMPERIAL) == "6.2 mi"

    def test_short_unit_names(self):
        assert format_distance(0.5, "km") == "500 m"
        assert format_distance(1.5, "mi") == "4921 ft"

    def test_whole_units_round_half_up(self):
        assert format_distance(0.0625) == "63 m"
        assert format_distance(0) == "0 m"

    def test_non_finite_values_render_without_error(self):
        assert format_distance(-math.inf) == "-inf km"
        assert format_distance(-math.inf, "imperial") == "-inf mi"
        assert format_distance(math.nan) == "nan km"

    def test_unknown_unit(self):
        with pytest.raises(ValueError):
            format_distance(1.0, "furlongs")


def test_distance_result():
    result = DistanceResult.between(SAN_FRANCISCO, SAN_FRANCISCO)
    assert result.kilometers == 0
    assert str(result) == "0 m"

    result = DistanceResult(1.5)
    assert result.miles == pytest.approx(0.9320565)
    assert result.format("imperial") == "4921 ft"


@pytest.mark.parametrize(
    "km, expected",
    [(0.0, True), (3.2, True), (None, False), (math.nan, False), (math.inf, False), (-1.0, False)],
)
def test_is_displayable(km, expected):
    assert is_displayable(km) is expected

import math

import pytest

from geodesy import InvalidGridZoneFormatError, LatLon, NonexistentZoneError, forward, inverse
from geodesy.zones import (
    IRREGULAR_ZONES,
    LATITUDE_BANDS,
    band_letter,
    is_southern_band,
    resolve_central_meridian,
    resolve_zone,
    zone_number,
)


def zone_of(lat, lon):
    grid_zone, meridian = resolve_zone(LatLon(lat, lon))
    return grid_zone, math.degrees(meridian)


# ---------------------------------------------------------------------------
# Band letters
# ---------------------------------------------------------------------------

def test_band_table_skips_i_and_o():
    assert len(LATITUDE_BANDS) == 20
    assert "I" not in LATITUDE_BANDS and "O" not in LATITUDE_BANDS


@pytest.mark.parametrize("index,letter", list(enumerate(LATITUDE_BANDS)))
def test_band_letter_matches_table_inside_each_band(index, letter):
    bottom = -80.0 + 8.0 * index
    assert band_letter(bottom) == letter
    assert band_letter(bottom + 4.0) == letter
    assert band_letter(bottom + 7.999) == letter


@pytest.mark.parametrize("lat,letter", [
    (-80.0, "C"),
    (-32.5, "H"),
    (-32.0, "J"),
    (-0.5, "M"),
    (0.0, "N"),
    (7.99, "N"),
    (8.0, "P"),
    (80.0, "X"),
    (80.5, "X"),
    (84.0, "X"),
])
def test_band_letter_transitions(lat, letter):
    assert band_letter(lat) == letter


def test_southern_bands():
    assert [b for b in LATITUDE_BANDS if is_southern_band(b)] == list("CDEFGHJKLM")
    for polar in "ABYZ":
        assert not is_southern_band(polar)


# ---------------------------------------------------------------------------
# Forward resolution
# ---------------------------------------------------------------------------

def test_standard_zone():
    grid_zone, meridian = zone_of(34.111397, -119.330528)
    assert grid_zone == "11S"
    assert meridian == pytest.approx(-117.0)


def test_zone_string_is_zero_padded():
    assert zone_of(0.0, -177.0) == ("01N", pytest.approx(-177.0))
    assert zone_of(-0.5, 3.0)[0] == "31M"


@pytest.mark.parametrize("lon,number", [(-180.0, 1), (-174.0, 2), (-0.1, 30), (0.0, 31), (179.9, 60), (180.0, 60)])
def test_zone_number(lon, number):
    assert zone_number(lon) == number


@pytest.mark.parametrize("lat,lon,grid_zone", [
    (84.0001, -1.0, "30Y"),
    (84.0001, 0.0, "31Z"),
    (89.0, 120.0, "31Z"),
    (-80.0001, -0.1, "30A"),
    (-80.0001, 0.0, "31B"),
    (-90.0, -45.0, "30A"),
])
def test_polar_caps(lat, lon, grid_zone):
    assert zone_of(lat, lon) == (grid_zone, 0.0)


@pytest.mark.parametrize("lon,grid_zone", [(-100.0, "14X"), (0.0, "31X"), (45.0, "38X")])
def test_latitude_80_stays_in_band_x(datum, lon, grid_zone):
    utm = forward(LatLon(80.0, lon), datum)
    assert utm.grid_zone == grid_zone
    back = inverse(utm, datum)
    assert back.latitude == pytest.approx(80.0, abs=1e-5)
    assert back.longitude == pytest.approx(lon, abs=1e-5)


def test_polar_limits_are_exclusive():
    assert zone_of(84.0, -100.0) == ("14X", pytest.approx(-99.0))
    assert zone_of(-80.0, -100.0) == ("14C", pytest.approx(-99.0))


@pytest.mark.parametrize("lat,lon,grid_zone,meridian", [
    (75.0, 0.0, "31X", 4.5),
    (75.0, 8.99, "31X", 4.5),
    (75.0, 9.0, "33X", 15.0),
    (75.0, 20.99, "33X", 15.0),
    (78.0, 21.0, "35X", 27.0),
    (80.0, 33.0, "37X", 37.5),
    (84.0, 41.99, "37X", 37.5),
    (72.0, 5.0, "31X", 4.5),
    (75.0, 42.0, "38X", 45.0),
    (75.0, -1.0, "30X", -3.0),
])
def test_svalbard_zones(lat, lon, grid_zone, meridian):
    assert zone_of(lat, lon) == (grid_zone, pytest.approx(meridian))


@pytest.mark.parametrize("lat,lon,grid_zone,meridian", [
    (60.0, 0.0, "31V", 1.5),
    (60.0, 2.99, "31V", 1.5),
    (60.0, 3.0, "32V", 7.5),
    (56.0, 5.0, "32V", 7.5),
    (63.99, 11.99, "32V", 7.5),
    (60.0, 12.0, "33V", 15.0),
    (64.0, 5.0, "31W", 3.0),
    (60.0, -0.5, "30V", -3.0),
])
def test_norway_zones(lat, lon, grid_zone, meridian):
    assert zone_of(lat, lon) == (grid_zone, pytest.approx(meridian))


def test_irregular_rules_are_ordered_and_disjoint_in_longitude():
    for band in "XV":
        rules = [r for r in IRREGULAR_ZONES if r.label.endswith(band)]
        for left, right in zip(rules, rules[1:]):
            assert left.lon_max == right.lon_min


def test_resolve_zone_is_deterministic():
    point = LatLon(47.6, -122.3)
    assert resolve_zone(point) == resolve_zone(LatLon(47.6, -122.3))


# ---------------------------------------------------------------------------
# Inverse resolution
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("grid_zone,meridian", [
    ("13S", -105.0),
    ("01C", -177.0),
    ("60X", 177.0),
    ("30A", 0.0),
    ("31B", 0.0),
    ("30Y", 0.0),
    ("31Z", 0.0),
    ("31V", 1.5),
    ("32V", 7.5),
    ("33V", 15.0),
    ("34V", 21.0),
    ("37V", 39.0),
    ("31X", 4.5),
    ("33X", 15.0),
    ("35X", 27.0),
    ("37X", 37.5),
    ("30X", -3.0),
    ("38X", 45.0),
])
def test_central_meridian(grid_zone, meridian):
    assert math.degrees(resolve_central_meridian(grid_zone)) == pytest.approx(meridian)


@pytest.mark.parametrize("grid_zone", ["32X", "34X", "36X"])
def test_nonexistent_zones(grid_zone):
    with pytest.raises(NonexistentZoneError):
        resolve_central_meridian(grid_zone)


@pytest.mark.parametrize("grid_zone", ["AB1", "1S", "", "S13", "1 S"])
def test_invalid_zone_format(grid_zone):
    with pytest.raises(InvalidGridZoneFormatError):
        resolve_central_meridian(grid_zone)


def test_every_forward_zone_resolves_back_to_its_meridian():
    for lat in range(-80, 85, 4):
        for lon in range(-180, 180, 3):
            grid_zone, meridian = resolve_zone(LatLon(float(lat), float(lon)))
            assert resolve_central_meridian(grid_zone) == pytest.approx(meridian), grid_zone

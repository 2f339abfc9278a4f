import pytest

from geodesy import (
    DMS,
    InvalidHemisphereError,
    LatitudeHemisphere,
    LongitudeHemisphere,
    decimal_to_dms,
    dms_to_decimal,
)
from geodesy.angles import (
    from_sexagesimal,
    parse_hemisphere,
    seconds,
    to_sexagesimal,
    whole_degrees,
    whole_minutes,
    whole_seconds,
)


def test_components():
    assert whole_degrees(34.111397) == 34
    assert whole_minutes(34.111397) == 6
    assert seconds(34.111397) == pytest.approx(41.029, abs=1e-3)
    assert whole_seconds(34.111397) == 41


def test_decimal_to_dms():
    dms = decimal_to_dms(34.111397)
    assert (dms.degrees, dms.minutes) == (34, 6)
    assert dms.seconds == pytest.approx(41.029, abs=1e-3)
    assert dms.whole_seconds == 41


def test_decimal_to_dms_exact_half():
    assert decimal_to_dms(30.5) == DMS(30, 30, 0.0)


def test_dms_to_decimal():
    assert dms_to_decimal(34, 6, 41.03) == pytest.approx(34.1113972, abs=1e-7)
    assert dms_to_decimal(119, 19, 49.9) == pytest.approx(119.3305278, abs=1e-7)


def test_dms_to_decimal_does_not_range_check():
    assert dms_to_decimal(-10, 30, 0) == pytest.approx(-9.5)
    assert dms_to_decimal(0, 90, 0) == pytest.approx(1.5)


@pytest.mark.parametrize("value", [0.0, 12.75, 45.999999, 89.0001, 179.25])
def test_dms_round_trip(value):
    dms = decimal_to_dms(value)
    assert 0 <= dms.minutes < 60
    assert 0.0 <= dms.seconds < 60.0
    assert dms_to_decimal(dms.degrees, dms.minutes, dms.seconds) == pytest.approx(value, abs=1e-9)


def test_to_sexagesimal_west():
    dms, hemisphere = to_sexagesimal(-119.330528, "lon")
    assert hemisphere is LongitudeHemisphere.W
    assert (dms.degrees, dms.minutes) == (119, 19)
    assert dms.seconds == pytest.approx(49.90, abs=1e-2)


def test_to_sexagesimal_north():
    dms, hemisphere = to_sexagesimal(34.111397, "lat")
    assert hemisphere is LatitudeHemisphere.N
    assert dms.degrees == 34


def test_zero_reports_south_and_west():
    assert to_sexagesimal(0.0, "lat")[1] is LatitudeHemisphere.S
    assert to_sexagesimal(0.0, "lon")[1] is LongitudeHemisphere.W


def test_to_sexagesimal_rejects_unknown_kind():
    with pytest.raises(ValueError):
        to_sexagesimal(1.0, "height")


@pytest.mark.parametrize("hemisphere,expected", [
    ("N", 34.5),
    ("s", -34.5),
    (" e ", 34.5),
    ("W", -34.5),
    (LatitudeHemisphere.S, -34.5),
    (LongitudeHemisphere.E, 34.5),
])
def test_from_sexagesimal(hemisphere, expected):
    assert from_sexagesimal(34, 30, 0, hemisphere) == pytest.approx(expected)


def test_from_sexagesimal_rejects_unknown_hemisphere():
    with pytest.raises(ValueError, match="Unknown hemisphere"):
        from_sexagesimal(34, 30, 0, "Q")


@pytest.mark.parametrize("value,kind,expected", [
    ("n", "lat", LatitudeHemisphere.N),
    (" S", "lat", LatitudeHemisphere.S),
    ("w", "lon", LongitudeHemisphere.W),
    (LongitudeHemisphere.E, "lon", LongitudeHemisphere.E),
    ("E", None, LongitudeHemisphere.E),
])
def test_parse_hemisphere(value, kind, expected):
    assert parse_hemisphere(value, kind) is expected


@pytest.mark.parametrize("value,kind", [
    ("E", "lat"),
    ("W", "lat"),
    (LongitudeHemisphere.W, "lat"),
    ("N", "lon"),
    (LatitudeHemisphere.S, "lon"),
    ("", None),
    (None, None),
])
def test_parse_hemisphere_rejects_wrong_axis(value, kind):
    with pytest.raises(InvalidHemisphereError) as excinfo:
        parse_hemisphere(value, kind)
    assert excinfo.value.error_type == "InvalidHemisphere"
    assert excinfo.value.kind == kind


def test_parse_hemisphere_rejects_unknown_kind():
    with pytest.raises(ValueError, match="kind must be"):
        parse_hemisphere("N", "height")


def test_from_sexagesimal_checks_axis():
    assert from_sexagesimal(34, 30, 0, "S", kind="lat") == pytest.approx(-34.5)
    with pytest.raises(InvalidHemisphereError, match="longitude hemisphere"):
        from_sexagesimal(34, 30, 0, "N", kind="lon")

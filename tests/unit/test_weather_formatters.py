"""
Testes Unitários - Weather Formatters
"""
from datetime import datetime

import pytest

from shared.utils.weather_formatters import (
    WeatherIcon,
    direction_to_compass,
    format_date_label,
    format_humidity,
    format_summary,
    format_temperature,
    format_utc_offset,
    format_visibility,
    format_wind,
    icon_name_for,
)


class TestFormatWind:

    def test_five_meters_per_second_north(self):
        assert format_wind(5, 0) == "18 km/h N"

    def test_speed_rounded_to_whole_kmh(self):
        # 4.63 m/s = 16.668 km/h
        assert format_wind(4.63, 230) == "17 km/h SW"

    def test_calm(self):
        assert format_wind(0, 0) == "0 km/h N"


class TestDirectionToCompass:

    @pytest.mark.parametrize("degrees,expected", [
        (0, "N"),
        (22, "NNE"),
        (45, "NE"),
        (90, "E"),
        (135, "SE"),
        (180, "S"),
        (202, "SSW"),
        (270, "W"),
        (315, "NW"),
        (337, "NNW"),
        (349, "N"),
        (359, "N"),
    ])
    def test_sixteen_point_rose(self, degrees, expected):
        assert direction_to_compass(degrees) == expected

    def test_sector_boundary_rounds_up(self):
        assert direction_to_compass(11) == "N"
        assert direction_to_compass(12) == "NNE"


class TestFormatVisibility:

    def test_meters_below_one_kilometer(self):
        assert format_visibility(500) == "500 m"
        assert format_visibility(999) == "999 m"

    def test_kilometers_with_one_decimal(self):
        assert format_visibility(10000) == "10.0 km"
        assert format_visibility(1000) == "1.0 km"
        assert format_visibility(2500) == "2.5 km"

    def test_zero(self):
        assert format_visibility(0) == "0 m"


class TestFormatUtcOffset:

    @pytest.mark.parametrize("offset,expected", [
        (-28800, "UTC-8"),
        (-19800, "UTC-5:30"),
        (0, "UTC+0"),
        (3600, "UTC+1"),
        (19800, "UTC+5:30"),
        (20700, "UTC+5:45"),
        (-12600, "UTC-3:30"),
    ])
    def test_offsets(self, offset, expected):
        assert format_utc_offset(offset) == expected


class TestIconNameFor:

    @pytest.mark.parametrize("code,expected", [
        ("01d", WeatherIcon.CLEAR),
        ("01n", WeatherIcon.CLEAR),
        ("02d", WeatherIcon.PARTLY_CLOUDY),
        ("03n", WeatherIcon.CLOUDY),
        ("04d", WeatherIcon.CLOUDY),
        ("09d", WeatherIcon.RAIN),
        ("10n", WeatherIcon.RAIN_WITH_SUN),
        ("11d", WeatherIcon.THUNDER),
        ("13n", WeatherIcon.SNOW),
        ("50d", WeatherIcon.FOG),
    ])
    def test_known_codes(self, code, expected):
        assert icon_name_for(code) == expected.value

    @pytest.mark.parametrize("code", ["", "99d", "01", "unknown"])
    def test_unknown_codes_fall_back_to_cloudy(self, code):
        assert icon_name_for(code) == "cloudy"


class TestSimpleFormatters:

    @pytest.mark.parametrize("value,expected", [
        (14.62, "15"),
        (13.36, "13"),
        (31.0, "31"),
        (-3.7, "-4"),
    ])
    def test_temperature(self, value, expected):
        assert format_temperature(value) == expected

    def test_summary_is_title_cased(self):
        assert format_summary("broken clouds") == "Broken Clouds"

    def test_humidity(self):
        assert format_humidity(77) == "77%"

    def test_date_label(self):
        assert format_date_label(datetime(2026, 10, 18, 15, 45)) == "Oct 18, 2026, 03:45 PM"

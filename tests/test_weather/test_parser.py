"""Tests for the METAR/TAF decoder."""

import pytest

from airport_live.weather.parser import WeatherParser, is_unavailable, weather_label


class TestParseMetar:
    """Test METAR decoding."""

    def test_basic_metar(self):
        raw = "EGLL 010000Z 27015G25KT 9999 FEW020 BKN035 12/08 Q1013"
        metar = WeatherParser.parse_metar(raw)

        assert metar.is_available
        assert metar.raw == raw
        assert metar.wind_direction_deg == 270
        assert metar.wind_speed_kt == 15
        assert metar.gust_kt == 25
        assert metar.visibility == "9999"
        assert metar.visibility_meters == 9999
        assert [c.code for c in metar.cloud_layers] == ["FEW020", "BKN035"]
        assert metar.temperature_c == 12
        assert metar.dewpoint_c == 8
        assert metar.qnh_hpa == 1013
        assert metar.altimeter_inhg is None

    def test_negative_temperatures(self):
        metar = WeatherParser.parse_metar("ENGM 151250Z 01005KT 9999 FEW015 M05/M10 Q1030")
        assert metar.temperature_c == -5
        assert metar.dewpoint_c == -10

    def test_order_independent(self):
        a = WeatherParser.parse_metar("LPPT 27010KT Q1015 9999 15/10")
        b = WeatherParser.parse_metar("LPPT 15/10 9999 Q1015 27010KT")
        assert (a.wind_direction_deg, a.visibility, a.temperature_c, a.qnh_hpa) == \
            (b.wind_direction_deg, b.visibility, b.temperature_c, b.qnh_hpa)

    def test_variable_wind(self):
        metar = WeatherParser.parse_metar("LPPT 121030Z VRB03KT CAVOK 20/10 Q1020")
        assert metar.wind_direction_deg is None
        assert metar.wind_speed_kt == 3

    def test_calm_wind(self):
        metar = WeatherParser.parse_metar("LPPT 121030Z 00000KT CAVOK 20/10 Q1020")
        assert metar.wind_direction_deg is None
        assert metar.wind_speed_kt == 0

    def test_first_wind_group_wins(self):
        metar = WeatherParser.parse_metar("LPPT 27010KT 09020KT 9999")
        assert metar.wind_direction_deg == 270
        assert metar.wind_speed_kt == 10

    def test_three_digit_speed(self):
        metar = WeatherParser.parse_metar("XXXX 270105G120KT 9999")
        assert metar.wind_speed_kt == 105
        assert metar.gust_kt == 120

    def test_cavok(self):
        metar = WeatherParser.parse_metar("LPPT 121030Z 24005KT CAVOK 20/10 Q1015")
        assert metar.visibility == "CAVOK"
        assert metar.visibility_meters == 10000

    def test_statute_miles(self):
        metar = WeatherParser.parse_metar("KJFK 211200Z 18008KT 10SM BKN250 12/11 A2990")
        assert metar.visibility == "10SM"
        assert metar.visibility_meters == pytest.approx(16093.4)
        assert metar.altimeter_inhg == pytest.approx(29.90)
        assert metar.qnh_hpa is None

    def test_fractional_statute_miles(self):
        metar = WeatherParser.parse_metar("KJFK 211200Z 18008KT 1 1/2SM BR OVC005 12/11 A2990")
        assert metar.visibility == "1 1/2SM"
        assert metar.visibility_meters == pytest.approx(2414.0, abs=0.1)
        assert metar.ceiling_ft == 500

    def test_first_visibility_wins(self):
        metar = WeatherParser.parse_metar("LPPT 27010KT 4000 1200")
        assert metar.visibility == "4000"

    def test_convective_cloud(self):
        metar = WeatherParser.parse_metar("LPPT 27010KT 9999 FEW025CB SCT030TCU")
        assert [c.code for c in metar.cloud_layers] == ["FEW025", "SCT030"]
        assert [c.convective for c in metar.cloud_layers] == ["CB", "TCU"]

    def test_present_weather_labels(self):
        metar = WeatherParser.parse_metar("LPPT 27010KT 3000 +TSRA -SHRA BR FG 12/11 Q1000")
        assert metar.present_weather == (
            "Heavy Thunderstorm Rain",
            "Light Showers Rain",
            "Mist",
            "Fog",
        )
        assert metar.weather_codes == ("+TSRA", "-SHRA", "BR", "FG")

    def test_freezing_drizzle(self):
        metar = WeatherParser.parse_metar("EFHK 27010KT 2000 FZDZ OVC004 M01/M02 Q1010")
        assert metar.present_weather == ("Freezing Drizzle",)

    def test_remarks_not_decoded(self):
        metar = WeatherParser.parse_metar("KJFK 18008KT 10SM 12/11 A2990 RMK AO2 SLP125 RA")
        assert metar.present_weather == ()

    def test_trailing_terminator_stripped(self):
        metar = WeatherParser.parse_metar("LPPT 27010KT 9999 15/10 Q1015=")
        assert metar.qnh_hpa == 1015

    def test_lowercase_accepted(self):
        metar = WeatherParser.parse_metar("lppt 27010kt 9999")
        assert metar.wind_speed_kt == 10

    def test_unknown_tokens_ignored(self):
        metar = WeatherParser.parse_metar("METAR LPPT 121030Z AUTO 27010KT 240V300 9999 NOSIG")
        assert metar.wind_direction_deg == 270
        assert metar.visibility == "9999"
        assert metar.present_weather == ()

    @pytest.mark.parametrize("raw", [None, "", "   ", "METAR LPPT not available"])
    def test_missing_metar(self, raw):
        metar = WeatherParser.parse_metar(raw)
        assert not metar.is_available
        assert metar.raw is None
        assert metar.wind_speed_kt is None
        assert metar.cloud_layers == ()
        assert metar.present_weather == ()

    def test_no_wind_group(self):
        metar = WeatherParser.parse_metar("LPPT 121030Z 9999 15/10")
        assert metar.is_available
        assert metar.wind_speed_kt is None

    @pytest.mark.parametrize("raw", [42, b"LPPT 27010KT", ["LPPT"]])
    def test_non_string_raises(self, raw):
        with pytest.raises(TypeError):
            WeatherParser.parse_metar(raw)


class TestParseTaf:
    """Test TAF segmentation and decoding."""

    def test_from_and_tempo(self):
        periods = WeatherParser.parse_taf("FM120300 18010KT 9999 TEMPO 1203/1206 4000 BR")

        assert [p.label for p in periods] == ["FM 120300", "TEMPO 1203/1206"]
        assert periods[0].wind_direction_deg == 180
        assert periods[0].wind_speed_kt == 10
        assert periods[0].visibility == "9999"
        assert periods[1].visibility == "4000"
        assert periods[1].present_weather == ("Mist",)

    def test_initial_period(self):
        raw = "TAF LPPT 120500Z 1206/1312 32012KT 9999 FEW020 BECMG 1212/1214 25008KT"
        periods = WeatherParser.parse_taf(raw)

        assert [p.label for p in periods] == ["INITIAL", "BECMG 1212/1214"]
        assert periods[0].wind_direction_deg == 320
        assert [c.code for c in periods[0].cloud_layers] == ["FEW020"]
        assert periods[1].wind_direction_deg == 250

    def test_empty_initial_omitted(self):
        periods = WeatherParser.parse_taf("FM120300 18010KT")
        assert [p.label for p in periods] == ["FM 120300"]

    def test_prob_tempo_is_one_period(self):
        periods = WeatherParser.parse_taf("FM120300 18010KT 9999 PROB30 TEMPO 1203/1206 2000 TSRA")
        assert [p.label for p in periods] == ["FM 120300", "PROB30 TEMPO 1203/1206"]
        assert periods[1].change_type == "PROB30"
        assert periods[1].present_weather == ("Thunderstorm Rain",)

    def test_prob_with_range(self):
        periods = WeatherParser.parse_taf("FM120300 18010KT PROB40 1206/1209 0800 FG")
        assert periods[1].label == "PROB40 1206/1209"
        assert periods[1].visibility == "0800"

    def test_order_of_appearance(self):
        raw = "FM120000 18010KT BECMG 1203/1205 20015KT TEMPO 1206/1208 3000 FM121200 22020KT"
        labels = [p.label for p in WeatherParser.parse_taf(raw)]
        assert labels == ["FM 120000", "BECMG 1203/1205", "TEMPO 1206/1208", "FM 121200"]

    def test_no_temperature_in_periods(self):
        period = WeatherParser.parse_taf("FM120300 18010KT 15/10 Q1015")[0]
        assert not hasattr(period, 'temperature_c')

    @pytest.mark.parametrize("raw", [None, "", "TAF LPPT not available"])
    def test_missing_taf(self, raw):
        assert WeatherParser.parse_taf(raw) == []

    def test_non_string_raises(self):
        with pytest.raises(TypeError):
            WeatherParser.parse_taf(1234)


class TestHelpers:

    def test_weather_label_plain(self):
        assert weather_label(None, None, "BR") == "Mist"

    def test_weather_label_full(self):
        assert weather_label("+", "SH", "SN") == "Heavy Showers Snow"

    def test_is_unavailable(self):
        assert is_unavailable(None)
        assert is_unavailable("TAF LPPT not available")
        assert not is_unavailable("LPPT 27010KT")

    def test_tokenize_merges_fraction(self):
        assert WeatherParser.tokenize("KJFK 2 1/4SM BR") == ["KJFK", "2 1/4SM", "BR"]

    def test_tokenize_stops_at_remarks(self):
        assert WeatherParser.tokenize("KJFK A2990 RMK AO2") == ["KJFK", "A2990"]

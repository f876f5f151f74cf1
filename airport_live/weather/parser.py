"""
METAR and TAF decoder.

The decoder is split in two: a tokenizer that turns the report into
whitespace tokens (merging split statute-mile fractions and dropping
remarks) and a classifier that matches each whole token against the report
grammar. Classification is order independent; the first wind and visibility
group wins, cloud layers and weather groups accumulate in order.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Sequence, Tuple

from airport_live.weather.codes import (
    CLOUD_COVER,
    DESCRIPTORS,
    INTENSITY,
    NOT_AVAILABLE_MARKER,
    PHENOMENA,
)
from airport_live.weather.models import CloudLayer, ParsedMetar, TafPeriod

logger = logging.getLogger(__name__)

_METERS_PER_SM = 1609.34
_CAVOK_METERS = 10000.0

PHENOMENON_CODES = (
    'DZ', 'RA', 'SN', 'SG', 'PL', 'GR', 'GS', 'BR', 'FG',
    'FU', 'VA', 'DU', 'SA', 'HZ', 'SQ', 'FC', 'SS', 'DS',
)

WIND_RE = re.compile(r'^(\d{3}|VRB)(\d{2,3})(?:G(\d{2,3}))?KT$')
VISIBILITY_METERS_RE = re.compile(r'^(\d{4})(?:NDV)?$')
VISIBILITY_SM_RE = re.compile(r'^[PM]?(?:(\d{1,2}) )?(?:(\d{1,2})|(\d)/(\d{1,2}))SM$')
TEMPERATURE_RE = re.compile(r'^(M?\d{2})/(M?\d{2})$')
QNH_RE = re.compile(r'^Q(\d{4})$')
ALTIMETER_RE = re.compile(r'^A(\d{4})$')
CLOUD_RE = re.compile(r'^(%s)(\d{3})(CB|TCU)?$' % '|'.join(CLOUD_COVER))
WEATHER_RE = re.compile(
    r'^([+-])?(%s)?(%s)$' % ('|'.join(DESCRIPTORS), '|'.join(PHENOMENON_CODES))
)

_WHOLE_MILES_RE = re.compile(r'^\d$')
_FRACTION_SM_RE = re.compile(r'^[PM]?\d/\d{1,2}SM$')

TAF_FROM_RE = re.compile(r'^FM(\d{6})$')
TAF_CHANGE_RE = re.compile(r'^(TEMPO|BECMG|PROB\d{2})$')
TAF_RANGE_RE = re.compile(r'^\d{4}/\d{4}$')

INITIAL_PERIOD = 'INITIAL'


def is_unavailable(raw: Optional[str]) -> bool:
    """True for None, blank text, or the fetcher's "not available" marker."""
    if raw is None:
        return True
    text = raw.strip()
    return not text or NOT_AVAILABLE_MARKER in text.lower()


def weather_label(intensity: Optional[str], descriptor: Optional[str], phenomenon: str) -> str:
    """
    Human label for a present weather group.

    "+TSRA" -> "Heavy Thunderstorm Rain", "BR" -> "Mist". A phenomenon
    missing from the label table is reported as the raw group.
    """
    if phenomenon not in PHENOMENA:
        return f"{intensity or ''}{descriptor or ''}{phenomenon}"
    parts = []
    if intensity:
        parts.append(INTENSITY[intensity])
    if descriptor:
        parts.append(DESCRIPTORS.get(descriptor, descriptor))
    parts.append(PHENOMENA[phenomenon])
    return " ".join(parts)


def _signed_temperature(value: str) -> int:
    if value.startswith('M'):
        return -int(value[1:])
    return int(value)


def _statute_miles(match) -> float:
    whole, miles, numerator, denominator = match.groups()
    value = float(whole) if whole else 0.0
    if miles:
        value += float(miles)
    elif numerator and int(denominator):
        value += float(numerator) / float(denominator)
    return value


class WeatherParser:
    """
    Decode raw METAR and TAF text.

    Example:
        metar = WeatherParser.parse_metar(
            "EGLL 010000Z 27015G25KT 9999 FEW020 BKN035 12/08 Q1013"
        )
        metar.wind_direction_deg  # 270
        periods = WeatherParser.parse_taf(
            "FM120300 18010KT 9999 TEMPO 1203/1206 4000 BR"
        )
        [p.label for p in periods]  # ["FM 120300", "TEMPO 1203/1206"]
    """

    @staticmethod
    def tokenize(text: str) -> List[str]:
        """
        Split a report into tokens.

        Trailing "=" terminators are stripped, everything from RMK on is
        dropped and "1 1/2SM" style visibilities are merged into one token.
        """
        raw_tokens = [t.rstrip('=') for t in text.upper().split()]
        tokens: List[str] = []
        for token in raw_tokens:
            if not token:
                continue
            if token == 'RMK':
                break
            if _FRACTION_SM_RE.match(token) and tokens and _WHOLE_MILES_RE.match(tokens[-1]):
                tokens[-1] = f"{tokens[-1]} {token}"
                continue
            tokens.append(token)
        return tokens

    @classmethod
    def parse_metar(cls, raw: Optional[str]) -> ParsedMetar:
        """
        Decode a METAR string.

        Args:
            raw: Raw METAR text, or None when no report was fetched

        Returns:
            ParsedMetar; an empty one (raw=None) when the report is missing

        Raises:
            TypeError: raw is neither a string nor None
        """
        if raw is not None and not isinstance(raw, str):
            raise TypeError(f"METAR must be a string or None, got {type(raw).__name__}")
        if is_unavailable(raw):
            return ParsedMetar()

        text = raw.strip()
        fields = cls._classify(cls.tokenize(text), surface=True)
        if fields.get('wind_speed_kt') is None:
            logger.debug("No wind group in METAR: %s", text[:80])
        return ParsedMetar(raw=text, **fields)

    @classmethod
    def parse_taf(cls, raw: Optional[str]) -> List[TafPeriod]:
        """
        Decode a TAF string into its forecast periods, in order of appearance.

        Args:
            raw: Raw TAF text, or None when no forecast was fetched

        Returns:
            List of TafPeriod; empty when the forecast is missing

        Raises:
            TypeError: raw is neither a string nor None
        """
        if raw is not None and not isinstance(raw, str):
            raise TypeError(f"TAF must be a string or None, got {type(raw).__name__}")
        if is_unavailable(raw):
            return []

        return [
            TafPeriod(label=label, **cls._classify(tokens, surface=False))
            for label, tokens in cls.segment_taf(cls.tokenize(raw))
        ]

    @staticmethod
    def segment_taf(tokens: Sequence[str]) -> List[Tuple[str, List[str]]]:
        """
        Fold TAF tokens into closed (label, tokens) period accumulators.

        FMddhhmm, TEMPO, BECMG and PROBnn open a new period; a ddhh/ddhh
        validity right after TEMPO/BECMG/PROBnn is folded into the label.
        Tokens before the first period start form the INITIAL period, which
        is omitted when empty.
        """
        closed: List[Tuple[str, List[str]]] = []
        label, body = INITIAL_PERIOD, []
        awaiting_range = False

        def close():
            if label != INITIAL_PERIOD or body:
                closed.append((label, body))

        for token in tokens:
            from_match = TAF_FROM_RE.match(token)
            if from_match:
                close()
                label, body, awaiting_range = f"FM {from_match.group(1)}", [], False
            elif TAF_CHANGE_RE.match(token):
                # "PROB30 TEMPO ..." is a single period
                if token in ('TEMPO', 'BECMG') and label.startswith('PROB') and ' ' not in label and not body:
                    label = f"{label} {token}"
                else:
                    close()
                    label, body = token, []
                awaiting_range = True
            elif awaiting_range and TAF_RANGE_RE.match(token):
                label = f"{label} {token}"
                awaiting_range = False
            else:
                body.append(token)
                awaiting_range = False
        close()
        return closed

    @classmethod
    def _classify(cls, tokens: Sequence[str], surface: bool) -> Dict[str, Any]:
        """
        Classify tokens into report fields.

        Args:
            tokens: Tokenized report
            surface: Also decode temperature and pressure (METAR only)
        """
        fields: Dict[str, Any] = {
            'wind_direction_deg': None,
            'wind_speed_kt': None,
            'gust_kt': None,
            'visibility': None,
            'visibility_meters': None,
        }
        if surface:
            fields.update({
                'temperature_c': None,
                'dewpoint_c': None,
                'qnh_hpa': None,
                'altimeter_inhg': None,
            })
        clouds: List[CloudLayer] = []
        labels: List[str] = []
        codes: List[str] = []
        wind_seen = False

        for token in tokens:
            match = WIND_RE.match(token)
            if match:
                if not wind_seen:
                    wind_seen = True
                    direction, speed, gust = match.groups()
                    fields['wind_speed_kt'] = int(speed)
                    fields['gust_kt'] = int(gust) if gust else None
                    if direction != 'VRB' and not (direction == '000' and int(speed) == 0):
                        fields['wind_direction_deg'] = int(direction)
                continue

            if token == 'CAVOK':
                if fields['visibility'] is None:
                    fields['visibility'] = token
                    fields['visibility_meters'] = _CAVOK_METERS
                continue

            match = VISIBILITY_METERS_RE.match(token)
            if match:
                if fields['visibility'] is None:
                    fields['visibility'] = match.group(1)
                    fields['visibility_meters'] = float(match.group(1))
                continue

            match = VISIBILITY_SM_RE.match(token)
            if match:
                if fields['visibility'] is None:
                    fields['visibility'] = token
                    fields['visibility_meters'] = round(_statute_miles(match) * _METERS_PER_SM, 1)
                continue

            match = CLOUD_RE.match(token)
            if match:
                cover, height, convective = match.groups()
                clouds.append(CloudLayer(cover=cover, height_hundred_ft=int(height), convective=convective))
                continue

            match = WEATHER_RE.match(token)
            if match:
                labels.append(weather_label(*match.groups()))
                codes.append(token)
                continue

            if not surface:
                continue

            match = TEMPERATURE_RE.match(token)
            if match:
                if fields['temperature_c'] is None:
                    fields['temperature_c'] = _signed_temperature(match.group(1))
                    fields['dewpoint_c'] = _signed_temperature(match.group(2))
                continue

            match = QNH_RE.match(token)
            if match:
                if fields['qnh_hpa'] is None:
                    fields['qnh_hpa'] = int(match.group(1))
                continue

            match = ALTIMETER_RE.match(token)
            if match and fields['altimeter_inhg'] is None:
                fields['altimeter_inhg'] = int(match.group(1)) / 100

        fields['cloud_layers'] = tuple(clouds)
        fields['present_weather'] = tuple(labels)
        if surface:
            fields['weather_codes'] = tuple(codes)
        return fields

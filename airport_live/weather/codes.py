"""
METAR/TAF present-weather vocabulary.

Labels are pure data. A code recognized by the grammar in parser.py but
missing here is reported as the raw code.
"""

INTENSITY = {
    '+': 'Heavy',
    '-': 'Light',
}

DESCRIPTORS = {
    'TS': 'Thunderstorm',
    'SH': 'Showers',
    'FZ': 'Freezing',
}

PHENOMENA = {
    'DZ': 'Drizzle',
    'RA': 'Rain',
    'SN': 'Snow',
    'SG': 'Snow Grains',
    'PL': 'Ice Pellets',
    'GR': 'Hail',
    'GS': 'Small Hail',
    'BR': 'Mist',
    'FG': 'Fog',
    'FU': 'Smoke',
    'VA': 'Volcanic Ash',
    'DU': 'Dust',
    'SA': 'Sand',
    'HZ': 'Haze',
    'SQ': 'Squalls',
    'FC': 'Funnel Cloud',
    'SS': 'Sandstorm',
    'DS': 'Duststorm',
}

CLOUD_COVER = ('FEW', 'SCT', 'BKN', 'OVC')

# Marker returned by the weather fetcher when no source had a report
NOT_AVAILABLE_MARKER = 'not available'

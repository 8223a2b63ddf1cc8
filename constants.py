from enum import Enum

# Unit conversions
BITS_IN_OCTET = 8
OCTETS_IN_MO = 1_000_000
BITS_IN_KBIT = 1000
SECONDS_IN_MINUTE = 60


class BandwidthBound(str, Enum):
    MINIMUM = 'minimum'
    IDEAL = 'ideal'


class NetworkBound(str, Enum):
    UPPER = 'upper'
    LOWER = 'lower'

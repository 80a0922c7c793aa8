"""
Fixed tables of the HETU code format.

Covers the 2023/2024 separator extension: U-Y join '-' for the 1900s and
B-F join 'A' for the 2000s.
"""

from types import MappingProxyType

# 31 check symbols, index = checksum remainder. G, I, O and Q are excluded.
CHECK_CHARS = "0123456789ABCDEFHJKLMNPRSTUVWXY"

SEPARATOR_CENTURIES = MappingProxyType(
    {
        "+": 1800,
        "-": 1900,
        "Y": 1900,
        "X": 1900,
        "W": 1900,
        "V": 1900,
        "U": 1900,
        "A": 2000,
        "B": 2000,
        "C": 2000,
        "D": 2000,
        "E": 2000,
        "F": 2000,
    }
)

CODE_LENGTH = 11

# Individual numbers reserved for real persons; 000, 001 and 900-999 are
# artificial (test) identities.
REAL_INDIVIDUAL_MIN = 2
REAL_INDIVIDUAL_MAX = 899

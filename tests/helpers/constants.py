"""Known encodings shared across tests.

Each entry maps an unscaled value to its minimal two's-complement
big-endian bytes.
"""

KNOWN_ENCODINGS: list[tuple[int, bytes]] = [
    (0, b"\x00"),
    (1, b"\x01"),
    (-1, b"\xff"),
    (127, b"\x7f"),
    (128, b"\x00\x80"),
    (-128, b"\x80"),
    (-129, b"\xff\x7f"),
    (255, b"\x00\xff"),
    (1234, b"\x04\xd2"),
    (-1234, b"\xfb\x2e"),
    (2**63 - 1, b"\x7f\xff\xff\xff\xff\xff\xff\xff"),
    (-(2**63), b"\x80\x00\x00\x00\x00\x00\x00\x00"),
]

# Largest 38-digit unscaled value; fills a fixed(16) exactly
MAX_38_DIGITS = 10**38 - 1

# Largest magnitude of a 96-bit platform decimal
MAX_96_BIT = 2**96 - 1

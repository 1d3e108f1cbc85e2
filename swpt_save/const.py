"""
Constants for the SWPT save file format.
"""

# Property frame markers
PREFIX_BYTE = 0x7E
POSTFIX_BYTE = 0x7B
ARRAY_START = 0x53
TYPE_PREFIX = 0xFF

# Marker written before the element count of an array payload
ARRAY_MARKER = 0x00

# Property names carry a single byte length prefix
MAX_NAME_LENGTH = 0xFF

# Arrays with at most this many items are listed inline by display_string
ARRAY_DISPLAY_LIMIT = 8

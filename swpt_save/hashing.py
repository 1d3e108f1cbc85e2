"""
Type name hashing for SWPT save files.

The game identifies value types by the 32-bit hash its runtime computes for
the full .NET type name (e.g. "System.Int32"). This is Mono's string hash:
Paul Hsieh's SuperFastHash run over UTF-16 code units instead of bytes, with
the accumulator seeded by the code unit count.
"""

import struct

MASK_32 = 0xFFFFFFFF


def _utf16_units(name: str) -> tuple[int, ...]:
    data = name.encode('utf-16-le')
    return struct.unpack(f'<{len(data) // 2}H', data)


def type_hash(name: str) -> int:
    """
    Compute the type id for a type name.

    Args:
        name: Full type name, e.g. "UnityEngine.Vector3"

    Returns:
        Hash as an unsigned 32-bit integer
    """
    units = _utf16_units(name)
    count = len(units)
    h = count

    # Two code units per round
    for i in range(0, count - 1, 2):
        h = (h + units[i]) & MASK_32
        tmp = ((units[i + 1] << 11) ^ h) & MASK_32
        h = ((h << 16) ^ tmp) & MASK_32
        h = (h + (h >> 11)) & MASK_32

    # Odd trailing unit
    if count & 1:
        h = (h + units[-1]) & MASK_32
        h = (h ^ (h << 11)) & MASK_32
        h = (h + (h >> 17)) & MASK_32

    # Avalanche
    h = (h ^ (h << 3)) & MASK_32
    h = (h + (h >> 5)) & MASK_32
    h = (h ^ (h << 4)) & MASK_32
    h = (h + (h >> 17)) & MASK_32
    h = (h ^ (h << 25)) & MASK_32
    h = (h + (h >> 6)) & MASK_32

    return h


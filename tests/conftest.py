"""
Pytest configuration and shared fixtures.
"""

import struct
from pathlib import Path

import pytest

INT32_ID = 0xE2A80856
STRING_ID = 0xFDE9F1EE
BOOL_ID = 0xAD4D7C9C
SINGLE_ID = 0x6E3ED76B


def make_frame(name: str, type_id: int, payload: bytes, array: bool = False) -> bytes:
    """Build one property frame by hand."""
    body = (b'\x53\xff' if array else b'\xff') + struct.pack('<I', type_id) + payload + b'\x7b'
    encoded = name.encode('ascii')
    return b'\x7e' + bytes([len(encoded)]) + encoded + struct.pack('<i', len(body)) + body


@pytest.fixture()
def foo_frame() -> bytes:
    """A single Int32 property named "foo" holding 42."""
    return b'\x7e\x03foo' + struct.pack('<i', 10) + b'\xff' + struct.pack('<I', INT32_ID) + struct.pack('<i', 42) + b'\x7b'


@pytest.fixture()
def sample_file_data() -> bytes:
    """Save file bytes with scalar, duplicate-name and array properties."""
    return b''.join(
        [
            make_frame('Gold', INT32_ID, struct.pack('<i', 1500)),
            make_frame('PlayerName', STRING_ID, b'\x04Aria'),
            make_frame('Hardcore', BOOL_ID, b'\x01'),
            make_frame('Gold', INT32_ID, struct.pack('<i', -7)),
            make_frame('Speeds', SINGLE_ID, b'\x00' + struct.pack('<i', 2) + struct.pack('<ff', 1.5, -0.25), array=True),
        ]
    )


@pytest.fixture()
def save_dir(tmp_path: Path, sample_file_data: bytes) -> Path:
    """Save directory with one valid file and one unrelated binary file."""
    directory = tmp_path / 'Slot1'
    directory.mkdir()
    (directory / 'Player.sav').write_bytes(sample_file_data)
    (directory / 'thumbnail.png').write_bytes(b'\x89PNG\r\n\x1a\n' + bytes(range(64)))
    return directory

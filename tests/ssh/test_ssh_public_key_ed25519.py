import base64

import pytest

from keyaudit.ssh.exceptions import TruncatedBuffer
from keyaudit.ssh.protocol.ssh_protocol import SSHFieldCursor
from keyaudit.ssh.public_keys.ed25519_public_key import ED25519PublicKey
from keyaudit.ssh.public_keys.ssh_public_key import SSHPublicKeyType
from tests.ssh.vectors import EXAMPLE_ED25519_PUBLIC_KEY, EXAMPLE_ED25519_PUBLIC_KEY_DATA


def _cursor_after_key_type(key_data):
    cursor = SSHFieldCursor(base64.b64decode(key_data))
    cursor.read_field()
    return cursor


def test_valid_key():
    pub_key = ED25519PublicKey(_cursor_after_key_type(EXAMPLE_ED25519_PUBLIC_KEY_DATA))
    assert SSHPublicKeyType.ED25519 is pub_key.type
    assert '4' == pub_key.type_version
    assert 'n/a' == pub_key.exponent
    assert 32 == len(pub_key.a)
    assert (32 - 1) * 8 == pub_key.modulus_bits


def test_key_matches_line():
    assert EXAMPLE_ED25519_PUBLIC_KEY.split(' ')[1] == EXAMPLE_ED25519_PUBLIC_KEY_DATA


def test_truncated_key():
    with pytest.raises(TruncatedBuffer):
        ED25519PublicKey(SSHFieldCursor(b'\x00\x00\x00\x20' + b'\x01' * 31))


def test_empty_key_field():
    pub_key = ED25519PublicKey(SSHFieldCursor(b'\x00\x00\x00\x00'))
    assert b'' == pub_key.a
    assert -8 == pub_key.modulus_bits

import base64
import hashlib

from keyaudit.ssh.public_keys.ssh_fingerprint import md5_fingerprint, sha256_fingerprint, get_fingerprints
from tests.ssh.vectors import EXAMPLE_RSA_PUBLIC_KEY_DATA, EXAMPLE_RSA_PUBLIC_KEY_MD5, \
    EXAMPLE_RSA_PUBLIC_KEY_SHA256, EXAMPLE_ED25519_PUBLIC_KEY_DATA, EXAMPLE_ED25519_PUBLIC_KEY_MD5, \
    EXAMPLE_ED25519_PUBLIC_KEY_SHA256


def test_known_answers():
    rsa_bytes = base64.b64decode(EXAMPLE_RSA_PUBLIC_KEY_DATA)
    assert EXAMPLE_RSA_PUBLIC_KEY_MD5 == md5_fingerprint(rsa_bytes)
    assert EXAMPLE_RSA_PUBLIC_KEY_SHA256 == sha256_fingerprint(rsa_bytes)

    ed25519_bytes = base64.b64decode(EXAMPLE_ED25519_PUBLIC_KEY_DATA)
    assert EXAMPLE_ED25519_PUBLIC_KEY_MD5 == md5_fingerprint(ed25519_bytes)
    assert EXAMPLE_ED25519_PUBLIC_KEY_SHA256 == sha256_fingerprint(ed25519_bytes)


def test_md5_format():
    fingerprint = md5_fingerprint(b'')
    assert 16 == len(fingerprint.split(':'))
    assert fingerprint == fingerprint.lower()
    assert hashlib.md5(b'').hexdigest() == fingerprint.replace(':', '')


def test_sha256_unpadded():
    fingerprint = sha256_fingerprint(b'abc')
    assert '=' not in fingerprint
    assert 43 == len(fingerprint)
    assert hashlib.sha256(b'abc').digest() == base64.b64decode(fingerprint + '=')


def test_one_byte_changes_both():
    key_bytes = bytearray(base64.b64decode(EXAMPLE_RSA_PUBLIC_KEY_DATA))
    before = get_fingerprints(bytes(key_bytes), want_sha256=True)
    key_bytes[-1] ^= 0x01
    after = get_fingerprints(bytes(key_bytes), want_sha256=True)

    assert before.md5 != after.md5
    assert before.sha256 != after.sha256
    assert before == get_fingerprints(base64.b64decode(EXAMPLE_RSA_PUBLIC_KEY_DATA), want_sha256=True)


def test_sha256_only_when_asked():
    fingerprints = get_fingerprints(b'abc')
    assert '' == fingerprints.sha256
    assert md5_fingerprint(b'abc') == fingerprints.md5

"""
.. module: keyaudit.ssh.public_keys.ssh_fingerprint
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import base64
import hashlib
from collections import namedtuple

SSHFingerprints = namedtuple('SSHFingerprints', ['md5', 'sha256'])


def md5_fingerprint(key_bytes):
    """
    :param key_bytes: The raw (base64 decoded) public key blob.
    :return: The MD5 digest as colon separated lowercase hex, e.g. '09:26:ae:...'.
    """
    fingerprint = hashlib.md5(key_bytes).hexdigest()
    return ':'.join(fingerprint[i:i + 2] for i in range(0, len(fingerprint), 2))


def sha256_fingerprint(key_bytes):
    """
    :param key_bytes: The raw (base64 decoded) public key blob.
    :return: The SHA-256 digest, base64 encoded without '=' padding.
    """
    digest = hashlib.sha256(key_bytes).digest()
    return base64.b64encode(digest).decode('ascii').rstrip('=')


def get_fingerprints(key_bytes, want_sha256=False):
    """
    :param key_bytes: The raw (base64 decoded) public key blob.
    :param want_sha256: The SHA-256 fingerprint is only computed when asked for.
    :return: SSHFingerprints, with an empty sha256 unless want_sha256.
    """
    return SSHFingerprints(md5=md5_fingerprint(key_bytes),
                           sha256=sha256_fingerprint(key_bytes) if want_sha256 else '')

"""
.. module: keyaudit.ssh.public_keys.ssh_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from collections import namedtuple
from enum import Enum

NOT_APPLICABLE = 'n/a'
SSH1_KEY_TYPE = 'ssh-1'
NOT_IMPLEMENTED_FINGERPRINT = 'not_implemented'
COULD_NOT_DECODE_FINGERPRINT = 'could_not_decode'


class SSHPublicKeyType(Enum):
    RSA = 'ssh-rsa'
    DSS = 'ssh-dss'
    ECDSA_NISTP256 = 'ecdsa-sha2-nistp256'
    ECDSA_NISTP384 = 'ecdsa-sha2-nistp384'
    ECDSA_NISTP521 = 'ecdsa-sha2-nistp521'
    ED25519 = 'ssh-ed25519'
    UNKNOWN = None

    @classmethod
    def from_key_type(cls, key_type):
        """
        :param key_type: Key type name as found at the start of a key blob.
        :return: The matching SSHPublicKeyType, or SSHPublicKeyType.UNKNOWN.
        """
        try:
            return cls(key_type)
        except ValueError:
            return cls.UNKNOWN

    @property
    def is_ecdsa(self):
        return self in (SSHPublicKeyType.ECDSA_NISTP256,
                        SSHPublicKeyType.ECDSA_NISTP384,
                        SSHPublicKeyType.ECDSA_NISTP521)


# SSHFP algorithm numbers.
class SSHPublicKeyTypeVersion(object):
    RSA = '1'
    DSS = '2'
    ECDSA = '3'
    ED25519 = '4'


DecodeOptions = namedtuple('DecodeOptions', ['want_sha256', 'debug'])
DecodeOptions.__new__.__defaults__ = (False, False)

KeyRecord = namedtuple('KeyRecord', [
    'line_number',
    'key_type',
    'modulus_bits',
    'exponent',
    'fingerprint_md5',
    'fingerprint_sha256',
    'comment',
    'type_version',
    'failed',
])
KeyRecord.__new__.__defaults__ = ('', False)


def fallback_key_record(line_number, comment):
    """
    The record reported for a key blob that could not be decoded.
    """
    return KeyRecord(line_number=line_number,
                     key_type=NOT_APPLICABLE,
                     modulus_bits=0,
                     exponent=NOT_APPLICABLE,
                     fingerprint_md5=COULD_NOT_DECODE_FINGERPRINT,
                     fingerprint_sha256=COULD_NOT_DECODE_FINGERPRINT,
                     comment=comment,
                     failed=True)


class SSHPublicKey(object):
    """
    Size information decoded from the body of an SSH public key blob.
    Subclasses read their fields from an SSHFieldCursor positioned just past the key type.
    """
    def __init__(self):
        self.type = None
        self.type_version = ''
        self.modulus_bits = 0
        self.exponent = NOT_APPLICABLE

    def to_key_record(self, key_type, fingerprints, comment, line_number):
        """
        :param key_type: The key type name exactly as it was read from the blob.
        :param fingerprints: SSHFingerprints of the raw blob.
        :param comment: Free text that followed the key on its line.
        :param line_number: 1-based line the key was found on.
        :return: A KeyRecord.
        """
        return KeyRecord(line_number=line_number,
                         key_type=key_type,
                         modulus_bits=self.modulus_bits,
                         exponent=self.exponent,
                         fingerprint_md5=fingerprints.md5,
                         fingerprint_sha256=fingerprints.sha256,
                         comment=comment,
                         type_version=self.type_version,
                         failed=False)

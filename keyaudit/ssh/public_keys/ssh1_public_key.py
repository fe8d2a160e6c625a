"""
.. module: keyaudit.ssh.public_keys.ssh1_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import re

from keyaudit.ssh.public_keys.ssh_public_key import KeyRecord, NOT_APPLICABLE, \
    NOT_IMPLEMENTED_FINGERPRINT, SSH1_KEY_TYPE

# SSH-1 keys store the modulus as a decimal number, SSH-2 base64 never has runs this long.
SSH1_MODULUS_PATTERN = re.compile(r'[0-9]{30,}')


def looks_like_ssh1(key_data):
    return SSH1_MODULUS_PATTERN.search(key_data) is not None


def ssh1_key_record(line_number, comment):
    return KeyRecord(line_number=line_number,
                     key_type=SSH1_KEY_TYPE,
                     modulus_bits=0,
                     exponent=NOT_APPLICABLE,
                     fingerprint_md5=NOT_IMPLEMENTED_FINGERPRINT,
                     fingerprint_sha256=NOT_IMPLEMENTED_FINGERPRINT,
                     comment=comment,
                     failed=True)

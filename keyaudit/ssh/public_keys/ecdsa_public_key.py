"""
.. module: keyaudit.ssh.public_keys.ecdsa_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from keyaudit.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType, \
    SSHPublicKeyTypeVersion


class ECDSAPublicKey(SSHPublicKey):
    def __init__(self, cursor, key_type=SSHPublicKeyType.ECDSA_NISTP256):
        """
        Extracts the size of an ECDSA Public Key from an SSH Public Key blob.
        See Section 3.1 of https://www.ietf.org/rfc/rfc5656.txt, the body is string curve name,
        string Q.
        :param cursor: SSHFieldCursor positioned just past the 'ecdsa-sha2-*' key type.
        :param key_type: Which of the ECDSA SSHPublicKeyTypes this is.
        """
        super(ECDSAPublicKey, self).__init__()

        self.type = key_type
        self.type_version = SSHPublicKeyTypeVersion.ECDSA

        # curve name is not checked against the key type
        cursor.read_field()

        q = cursor.read_field()

        # Q is 0x04 || x || y, half of what remains is the field size
        self.modulus_bits = (len(q) - 1) * 8 // 2

"""
.. module: keyaudit.ssh.public_keys.ed25519_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from keyaudit.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType, \
    SSHPublicKeyTypeVersion


class ED25519PublicKey(SSHPublicKey):
    def __init__(self, cursor):
        """
        Extracts the size of an ED25519 Public Key from an SSH Public Key blob.
        :param cursor: SSHFieldCursor positioned just past the 'ssh-ed25519' key type.
        """
        super(ED25519PublicKey, self).__init__()

        self.type = SSHPublicKeyType.ED25519
        self.type_version = SSHPublicKeyTypeVersion.ED25519

        # ed25519 public key is a single string https://tools.ietf.org/html/rfc8032#section-5.1.5
        self.a = cursor.read_field()

        # Same size rule as DSS and ECDSA, so a 32 byte key reports 248 bits.
        self.modulus_bits = (len(self.a) - 1) * 8

"""
.. module: keyaudit.ssh.public_keys.dss_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from keyaudit.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType, \
    SSHPublicKeyTypeVersion


class DSSPublicKey(SSHPublicKey):
    def __init__(self, cursor):
        """
        Extracts the size of a DSA Public Key from an SSH Public Key blob.
        The body is mpint p, q, g, y; only p is read.
        :param cursor: SSHFieldCursor positioned just past the 'ssh-dss' key type.
        """
        super(DSSPublicKey, self).__init__()

        self.type = SSHPublicKeyType.DSS
        self.type_version = SSHPublicKeyTypeVersion.DSS

        p = cursor.read_field()

        # assumes the mpint carries a sign byte
        self.modulus_bits = (len(p) - 1) * 8

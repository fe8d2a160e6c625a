"""
.. module: keyaudit.ssh.public_keys.rsa_public_key
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import logging

from keyaudit.ssh.protocol.ssh_protocol import unpack_ssh_unsigned
from keyaudit.ssh.public_keys.ssh_public_key import SSHPublicKey, SSHPublicKeyType, \
    SSHPublicKeyTypeVersion

logger = logging.getLogger(__name__)


class RSAPublicKey(SSHPublicKey):
    def __init__(self, cursor):
        """
        Extracts the useful RSA Public Key information from an SSH Public Key blob.
        See Section 6.6 of https://www.ietf.org/rfc/rfc4253.txt, the body is mpint e, mpint n.
        :param cursor: SSHFieldCursor positioned just past the 'ssh-rsa' key type.
        """
        super(RSAPublicKey, self).__init__()

        self.type = SSHPublicKeyType.RSA
        self.type_version = SSHPublicKeyTypeVersion.RSA

        self.e = unpack_ssh_unsigned(cursor.read_field())
        self.n = unpack_ssh_unsigned(cursor.read_field())

        # bit_length ignores the 0x00 sign byte mpint adds when the top bit is set
        self.key_size = self.n.bit_length()
        self.modulus_bits = self.key_size
        self.exponent = str(self.e)

        if cursor.debug:
            logger.debug('RSA key: e={}, modulus bits={}'.format(self.e, self.key_size))

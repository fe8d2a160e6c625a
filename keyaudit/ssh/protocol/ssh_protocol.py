"""
.. module: keyaudit.ssh.protocol.ssh_protocol
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import logging
import struct

from keyaudit.ssh.exceptions import TruncatedBuffer

logger = logging.getLogger(__name__)

UINT32_LENGTH = 4


def unpack_ssh_uint32(data, offset=0):
    """
    Unpacks a 32-bit unsigned integer.
    :param data: Bytes to read from.
    :param offset: Position of the most significant of the four bytes.
    :return: The integer, read in network byte order.
    """
    if offset < 0 or len(data) - offset < UINT32_LENGTH:
        raise TruncatedBuffer(
            "Need {} bytes for a uint32 at offset {}, {} available.".format(
                UINT32_LENGTH, offset, max(len(data) - offset, 0)))

    return struct.unpack_from('>I', data, offset)[0]


def unpack_ssh_unsigned(field):
    """
    Reads the body of an SSH mpint as an unsigned big-endian integer.
    A leading 0x00 sign byte does not change the value.
    :param field: The mpint body, without its length prefix.
    :return: A non-negative int.
    """
    return int.from_bytes(field, byteorder='big', signed=False)


class SSHFieldCursor(object):
    def __init__(self, data, debug=False):
        """
        Sequential reader over an SSH public key blob.
        See Section 6.6 of https://www.ietf.org/rfc/rfc4253.txt for more information.  Every field
        of a public key blob is a uint32 length followed by that many bytes, whether it holds a
        string or an mpint.
        :param data: The decoded key blob.
        :param debug: Log every field length that is read.
        """
        self.data = bytes(data)
        self.offset = 0
        self.debug = debug

    @property
    def remaining(self):
        return len(self.data) - self.offset

    def peek_length(self):
        """
        Returns the length prefix of the next field without moving past it.
        """
        return unpack_ssh_uint32(self.data, self.offset)

    def read_field(self):
        """
        Reads one length prefixed field and moves past it.
        :return: The field body, without the uint32 length prefix.
        """
        field_len = unpack_ssh_uint32(self.data, self.offset)
        body_start = self.offset + UINT32_LENGTH
        available = len(self.data) - body_start

        if self.debug:
            logger.debug('field at offset {}: length={}, remaining={}'.format(
                self.offset, field_len, available))

        if field_len > available:
            raise TruncatedBuffer(
                "Field at offset {} declares {} bytes, {} available.".format(
                    self.offset, field_len, available))

        self.offset = body_start + field_len
        return self.data[body_start:self.offset]

    def skip(self, n):
        """
        Moves forward without reading.
        :param n: Number of bytes to skip.
        """
        if n < 0 or n > self.remaining:
            raise TruncatedBuffer(
                "Cannot skip {} bytes at offset {}, {} available.".format(n, self.offset, self.remaining))

        self.offset += n

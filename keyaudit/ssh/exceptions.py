"""
.. module: keyaudit.ssh.exceptions
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""


class KeyDecodeError(Exception):
    """
    Base class for every reason an SSH public key blob could not be decoded.
    """


class InvalidEncoding(KeyDecodeError, ValueError):
    """
    The key data is not valid base64.
    """


class InvalidTypeLength(KeyDecodeError, ValueError):
    """
    The key type field is too short or too long to be a real key type name.
    """


class TruncatedBuffer(KeyDecodeError, ValueError):
    """
    A field declares more bytes than are left in the blob.
    """


class UnknownKeyType(KeyDecodeError, TypeError):
    """
    The key type name is not one this package can decode.
    """

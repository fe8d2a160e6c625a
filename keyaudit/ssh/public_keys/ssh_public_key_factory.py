"""
.. module: keyaudit.ssh.public_keys.ssh_public_key_factory
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import base64
import binascii
import logging

from keyaudit.ssh.exceptions import InvalidEncoding, InvalidTypeLength, KeyDecodeError, \
    UnknownKeyType
from keyaudit.ssh.protocol.ssh_protocol import SSHFieldCursor
from keyaudit.ssh.public_keys.dss_public_key import DSSPublicKey
from keyaudit.ssh.public_keys.ecdsa_public_key import ECDSAPublicKey
from keyaudit.ssh.public_keys.ed25519_public_key import ED25519PublicKey
from keyaudit.ssh.public_keys.rsa_public_key import RSAPublicKey
from keyaudit.ssh.public_keys.ssh1_public_key import looks_like_ssh1, ssh1_key_record
from keyaudit.ssh.public_keys.ssh_fingerprint import get_fingerprints
from keyaudit.ssh.public_keys.ssh_public_key import DecodeOptions, SSHPublicKeyType, \
    fallback_key_record

logger = logging.getLogger(__name__)

# Bounds (exclusive) on the length of the key type name, a sanity check against corrupt headers.
KEY_TYPE_MIN_LENGTH = 1
KEY_TYPE_MAX_LENGTH = 20


def decode_key_data(key_data):
    """
    Base64 decodes the key data of a public key line.  Missing '=' padding is tolerated.
    :param key_data: The base64 key data (i.e. 'AAAAB3NzaC1yc2E...').
    :return: The raw key blob.
    """
    if isinstance(key_data, str):
        key_data = key_data.encode('ascii', 'replace')

    key_data += b'=' * (-len(key_data) % 4)
    try:
        return base64.b64decode(key_data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidEncoding('Key is not in the proper format: {}'.format(e))


def read_key_type(cursor):
    """
    Reads the key type name that starts every SSH public key blob.
    :param cursor: SSHFieldCursor at the start of the blob.
    :return: The key type name as a str.
    """
    key_type_len = cursor.peek_length()
    if not KEY_TYPE_MIN_LENGTH < key_type_len < KEY_TYPE_MAX_LENGTH:
        raise InvalidTypeLength('Invalid key type length {}.'.format(key_type_len))

    return cursor.read_field().decode('utf-8', 'replace')


def get_ssh_public_key(key_type, cursor):
    """
    Returns the proper SSHPublicKey instance for the key type read from the blob.
    :param key_type: The key type name read from the blob.
    :param cursor: SSHFieldCursor positioned just past the key type.
    :return: An SSHPublicKey instance.
    """
    public_key_type = SSHPublicKeyType.from_key_type(key_type)

    if public_key_type is SSHPublicKeyType.RSA:
        return RSAPublicKey(cursor)
    elif public_key_type is SSHPublicKeyType.DSS:
        return DSSPublicKey(cursor)
    elif public_key_type.is_ecdsa:
        return ECDSAPublicKey(cursor, public_key_type)
    elif public_key_type is SSHPublicKeyType.ED25519:
        return ED25519PublicKey(cursor)
    else:
        raise UnknownKeyType('Unsupported Public Key Type: {}'.format(key_type))


def decode_public_key(key_data, line_number, comment, options=DecodeOptions()):
    """
    Decodes an SSH-2 public key blob into a KeyRecord.

    Never raises for bad key data: any decode failure results in the fallback KeyRecord, with
    both fingerprints set to 'could_not_decode'.
    :param key_data: The base64 key data of the line.
    :param line_number: 1-based line the key was found on.
    :param comment: Free text that followed the key.
    :param options: DecodeOptions.
    :return: A KeyRecord.
    """
    try:
        key_bytes = decode_key_data(key_data)
        fingerprints = get_fingerprints(key_bytes, options.want_sha256)

        cursor = SSHFieldCursor(key_bytes, debug=options.debug)
        key_type = read_key_type(cursor)
        if options.debug:
            logger.debug('line {}: key type {}'.format(line_number, key_type))

        public_key = get_ssh_public_key(key_type, cursor)
    except KeyDecodeError as e:
        if options.debug:
            logger.debug('line {}: could not decode key, {}: {}'.format(
                line_number, type(e).__name__, e))
        return fallback_key_record(line_number, comment)

    return public_key.to_key_record(key_type, fingerprints, comment, line_number)


def decode(key_type, key_data, comment, line_number, options=DecodeOptions()):
    """
    Decodes the key of one authorized_keys line.
    :param key_type: The key type word of the line.  Informational, the blob's own key type wins.
    :param key_data: The key data word of the line.
    :param comment: Free text that followed the key.
    :param line_number: 1-based line the key was found on.
    :param options: DecodeOptions.
    :return: A KeyRecord.
    """
    if looks_like_ssh1(key_data):
        if options.debug:
            logger.debug('line {}: looks like an SSH-1 key, not decoding'.format(line_number))
        return ssh1_key_record(line_number, comment)

    record = decode_public_key(key_data, line_number, comment, options)

    if options.debug and not record.failed and record.key_type != key_type:
        logger.debug('line {}: line says {} but key blob says {}'.format(
            line_number, key_type, record.key_type))

    return record

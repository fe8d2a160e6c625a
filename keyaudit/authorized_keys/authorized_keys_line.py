"""
.. module: keyaudit.authorized_keys.authorized_keys_line
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import re
from collections import namedtuple

from keyaudit.ssh.public_keys.ssh_public_key import DecodeOptions, SSH1_KEY_TYPE
from keyaudit.ssh.public_keys.ssh_public_key_factory import decode

KEY_TYPE_PATTERN = re.compile(r'(ssh-|ecdsa-).*\Z')

# Any long run of base64 characters, e.g. the decimal modulus of an SSH-1 key.
LEGACY_KEY_PATTERN = re.compile(r'([a-zA-Z0-9+=/]{65,})\s*(.*)\Z')

KeyLineTokens = namedtuple('KeyLineTokens', ['key_type', 'key_data', 'comment'])


def _is_key_type(word):
    return KEY_TYPE_PATTERN.match(word) is not None


def tokenize_key_line(line):
    """
    Splits an authorized_keys line into its key type, key data and comment.

    Handles 'keytype keydata [comment]' and 'options keytype keydata [comment]', where options
    contains no whitespace.  Lines with no key type word, such as SSH-1
    'bits exponent modulus [comment]' lines, are matched on their longest base64-ish word.
    :param line: A non-blank line that is not a '#' comment.
    :return: KeyLineTokens, or None if the line holds no key.
    """
    fields = line.strip().split(None, 2)
    if len(fields) < 2:
        return None

    if _is_key_type(fields[0]):
        return KeyLineTokens(fields[0], fields[1], fields[2] if len(fields) > 2 else '')

    words = line.split()
    if len(fields) > 2 and _is_key_type(fields[1]):
        return KeyLineTokens(words[1], words[2], ' '.join(words[3:]))

    for i, word in enumerate(words[:-1]):
        if _is_key_type(word):
            return KeyLineTokens(word, words[i + 1], ' '.join(words[i + 2:]))

    legacy_match = LEGACY_KEY_PATTERN.search(line.strip())
    if legacy_match:
        return KeyLineTokens(SSH1_KEY_TYPE, legacy_match.group(1), legacy_match.group(2))

    return None


def analyze_line(line, line_number, options=DecodeOptions()):
    """
    :param line: A non-blank line that is not a '#' comment.
    :param line_number: 1-based position of the line in its file.
    :param options: DecodeOptions.
    :return: A KeyRecord, or None if the line holds no key.
    """
    tokens = tokenize_key_line(line)
    if tokens is None:
        return None

    return decode(tokens.key_type, tokens.key_data, tokens.comment, line_number, options)

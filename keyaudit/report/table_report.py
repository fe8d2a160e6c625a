"""
.. module: keyaudit.report.table_report
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from keyaudit.ssh.public_keys.ssh_public_key import NOT_APPLICABLE

ANSI_RED = '\033[31m'
ANSI_GREEN = '\033[32m'
ANSI_YELLOW = '\033[33m'
ANSI_RESET = '\033[0m'

EXPONENT_DISPLAY_LENGTH = 10

SSHFP_HEADER = [
    'Line  KeyType             Bits   "SSHFP RR record"                                    Comment',
    '---- ------------------- ------ ---------------------------------------------------- -------------',
]
EXPONENT_HEADER = [
    'Line  KeyType             Bits   Exponent    Fingerprint (MD5)                                 Comment',
    '---- ------------------- ------ ----------- ------------------------------------------------- -------------',
]
MD5_HEADER = [
    'Line  KeyType             Bits   Fingerprint (MD5)                                 Comment',
    '---- ------------------- ------ ------------------------------------------------- -------------',
]


def get_header(show_sshfp=False, show_exponent=False):
    if show_sshfp:
        return SSHFP_HEADER
    elif show_exponent:
        return EXPONENT_HEADER
    return MD5_HEADER


def key_strength_color(record):
    """
    Picks the ANSI color for the bits column.
    Elliptic curve keys are green, RSA / DSS keys go red, yellow, uncolored, green as they grow.
    :param record: A decoded KeyRecord.
    :return: An ANSI escape sequence, or '' for no color.
    """
    key_type = record.key_type.lower()
    if 'ed25519' in key_type or 'ecdsa' in key_type:
        return ANSI_GREEN
    elif record.modulus_bits <= 1024:
        return ANSI_RED
    elif record.modulus_bits < 2048:
        return ANSI_YELLOW
    elif record.modulus_bits >= 4096:
        return ANSI_GREEN
    return ''


def format_key_record(record, show_sshfp=False, show_exponent=False, use_color=False):
    """
    Formats one KeyRecord as a table row matching get_header.
    :param record: The KeyRecord.
    :param show_sshfp: SSHFP layout, needs the SHA-256 fingerprint.
    :param show_exponent: Exponent layout.
    :param use_color: Color the bits column by key strength.  Decided by the caller.
    :return: The row, without a trailing newline.
    """
    if record.failed:
        bits = NOT_APPLICABLE if record.modulus_bits == 0 else str(record.modulus_bits)
        if show_sshfp:
            return '{:<4d} {:<20s} {:<6s} {:<52s}  "{}"'.format(
                record.line_number, record.key_type, bits, record.fingerprint_sha256, record.comment)
        elif show_exponent:
            return '{:<4d} {:<20s} {:<6s} {:<11s} {:<49s} "{}"'.format(
                record.line_number, record.key_type, bits, record.exponent, record.fingerprint_md5,
                record.comment)
        return '{:<4d} {:<20s} {:<6s} {:<49s} "{}"'.format(
            record.line_number, record.key_type, bits, record.fingerprint_md5, record.comment)

    color = key_strength_color(record) if use_color else ''
    reset = ANSI_RESET if color else ''
    bits = '{}{:<6d}{}'.format(color, record.modulus_bits, reset)

    if show_sshfp:
        return '{:<4d} {:<20s} {} "SSHFP {} 2 {}"  "{}"'.format(
            record.line_number, record.key_type, bits, record.type_version, record.fingerprint_sha256,
            record.comment)
    elif show_exponent:
        return '{:<4d} {:<20s} {} {:<11s} {:<49s} "{}"'.format(
            record.line_number, record.key_type, bits, record.exponent[:EXPONENT_DISPLAY_LENGTH],
            record.fingerprint_md5, record.comment)
    return '{:<4d} {:<20s} {} {:<49s} "{}"'.format(
        record.line_number, record.key_type, bits, record.fingerprint_md5, record.comment)


def write_table_report(records, stream, show_sshfp=False, show_exponent=False, use_color=False):
    """
    Writes the header, once, followed by one row per KeyRecord.  Nothing is written for no records.
    :return: The number of rows written.
    """
    rows = 0
    for record in records:
        if rows == 0:
            for line in get_header(show_sshfp, show_exponent):
                stream.write(line + '\n')
        stream.write(format_key_record(record, show_sshfp, show_exponent, use_color) + '\n')
        rows += 1
    return rows

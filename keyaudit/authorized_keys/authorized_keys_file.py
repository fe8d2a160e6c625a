"""
.. module: keyaudit.authorized_keys.authorized_keys_file
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import logging

from keyaudit.authorized_keys.authorized_keys_line import analyze_line
from keyaudit.ssh.public_keys.ssh_public_key import DecodeOptions

logger = logging.getLogger(__name__)


def iter_key_lines(lines):
    """
    Skips blank lines and '#' comments.
    :param lines: Iterable of text lines.
    :return: Generator of (line_number, stripped_line), line numbers are 1-based.
    """
    for line_number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if stripped and not stripped.startswith('#'):
            yield line_number, stripped


def analyze_lines(lines, options=DecodeOptions()):
    """
    :param lines: Iterable of text lines, e.g. an open authorized_keys file.
    :param options: DecodeOptions.
    :return: Generator of KeyRecords, in line order.
    """
    for line_number, line in iter_key_lines(lines):
        record = analyze_line(line, line_number, options)
        if record is None:
            logger.debug('line {}: no public key found'.format(line_number))
            continue
        yield record


def scan_key_file(filename, options=DecodeOptions()):
    """
    Reads an authorized_keys style file and decodes every key in it.
    :param filename: Path to the file.
    :param options: DecodeOptions.
    :return: List of KeyRecords, one per line holding a key, in line order.
    """
    with open(filename, 'r', encoding='utf-8', errors='replace') as f:
        records = list(analyze_lines(f, options))

    logger.info('{}: {} keys, {} could not be decoded'.format(
        filename, len(records), sum(1 for r in records if r.failed)))
    return records

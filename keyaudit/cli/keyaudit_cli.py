#!/usr/bin/env python

"""keyaudit
Lists the public keys of an authorized_keys style file with their type, size and fingerprint.

Usage:
  keyaudit [-h] [-v] [-e] [-s] [-d] [-j] [-c CONFIG] [--color {auto,always,never}] public_key_file

    -e, --exponent: Add the RSA public exponent column.

    -s, --sha, --sshfp: Print an SSHFP style record built from the SHA-256 fingerprint instead of
    the MD5 fingerprint.

    -d, --debug: Log the decoding of every key to stderr.

    -j, --json: Print the keys as a JSON list instead of a table.

    -c, --config: Config file with a [Key Audit Options] section.

Bits are colored when writing to a terminal: red up to 1024, yellow below 2048, green from 4096
and for elliptic curve keys.
"""
import argparse
import configparser
import logging
import sys

from keyaudit.__about__ import __title__, __version__
from keyaudit.authorized_keys.authorized_keys_file import scan_key_file
from keyaudit.cli.keyaudit_cli_common import set_logger, error_message
from keyaudit.config.keyaudit_config import KeyAuditConfig
from keyaudit.report.json_report import write_json_report
from keyaudit.report.table_report import write_table_report
from keyaudit.request.keyaudit_request import KeyAuditRequestSchema, OUTPUT_FORMAT_OPTIONS
from marshmallow import ValidationError

logger = logging.getLogger(__name__)


class KeyAuditArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        """
        Prints the usage and exits with 1 rather than argparse's 2.
        """
        self.print_usage(sys.stderr)
        self.exit(1, '{}: error: {}\n'.format(self.prog, message))


def get_parser():
    parser = KeyAuditArgumentParser(
        prog='keyaudit',
        description='List the public keys of an authorized_keys file with their size and fingerprint.')
    parser.add_argument('public_key_file', help='authorized_keys style file to audit')
    parser.add_argument('-v', '--version', action='version',
                        version='{} {} (Python {})'.format(__title__, __version__, sys.version.split()[0]))
    parser.add_argument('-e', '--exponent', dest='show_exponent', action='store_true', default=None,
                        help='show the RSA public exponent')
    parser.add_argument('-s', '--sha', '--sshfp', dest='show_sshfp', action='store_true', default=None,
                        help='show SSHFP style records built from SHA-256 fingerprints')
    parser.add_argument('-d', '--debug', dest='debug', action='store_true', default=None,
                        help='log decoding details to stderr')
    parser.add_argument('-j', '--json', dest='output_format', action='store_const', const='json',
                        default=None, help='print JSON instead of a table')
    parser.add_argument('-c', '--config', dest='config_file', default=None,
                        help='config file with a [Key Audit Options] section')
    parser.add_argument('--color', dest='color', choices=['auto', 'always', 'never'], default=None,
                        help='color the bits column (default: auto)')
    return parser


def load_request(args, config):
    """
    Merges the command line over the config file and validates the result.
    :param args: argparse.Namespace from get_parser.
    :param config: KeyAuditConfig.
    :return: KeyAuditRequest
    """
    options = config.getoptions()
    for option in ('show_sshfp', 'show_exponent', 'debug', 'color', 'output_format'):
        value = getattr(args, option)
        if value is not None:
            options[option] = value
    options['filename'] = args.public_key_file

    return KeyAuditRequestSchema().load(options)


def main(argv=None, stdout=None):
    stdout = stdout or sys.stdout
    args = get_parser().parse_args(argv)

    try:
        config = KeyAuditConfig(args.config_file)
        request = load_request(args, config)
        set_logger(config, request.debug)
    except ValidationError as e:
        return error_message('Error: Invalid options: {}'.format(e.messages), stdout)
    except (ValueError, configparser.Error) as e:
        return error_message('Error: {}'.format(e), stdout)

    try:
        records = scan_key_file(request.filename, request.decode_options())
    except FileNotFoundError:
        return error_message('Error: File not found: {}'.format(request.filename), stdout)
    except (IOError, OSError) as e:
        logger.debug('could not read {}'.format(request.filename), exc_info=True)
        return error_message('Error reading file: {}'.format(e), stdout)

    if request.output_format == OUTPUT_FORMAT_OPTIONS.json:
        write_json_report(records, stdout)
    else:
        is_terminal = hasattr(stdout, 'isatty') and stdout.isatty()
        write_table_report(records, stdout,
                           show_sshfp=request.show_sshfp,
                           show_exponent=request.show_exponent,
                           use_color=request.use_color(is_terminal))
    return 0


if __name__ == '__main__':
    sys.exit(main())

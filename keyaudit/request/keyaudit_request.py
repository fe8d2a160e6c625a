"""
.. module: keyaudit.request.keyaudit_request
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
from enum import Enum

from keyaudit.config.keyaudit_config import SHOW_SSHFP_DEFAULT, SHOW_EXPONENT_DEFAULT, \
    DEBUG_DEFAULT, COLOR_DEFAULT, OUTPUT_FORMAT_DEFAULT
from keyaudit.ssh.public_keys.ssh_public_key import DecodeOptions
from marshmallow import Schema, fields, post_load, RAISE, ValidationError, validates

COLOR_OPTIONS = Enum('ColorOptions',
                     'auto '  # color when stdout is a terminal
                     'always '
                     'never')

OUTPUT_FORMAT_OPTIONS = Enum('OutputFormatOptions',
                             'table '  # aligned columns, like ssh-keygen -l
                             'json')


def validate_color(color):
    if color not in COLOR_OPTIONS.__members__:
        raise ValidationError('Invalid color option.')


def validate_output_format(output_format):
    if output_format not in OUTPUT_FORMAT_OPTIONS.__members__:
        raise ValidationError('Invalid output format.')


class KeyAuditRequestSchema(Schema):
    class Meta:
        unknown = RAISE

    filename = fields.Str(required=True)
    show_sshfp = fields.Bool(load_default=SHOW_SSHFP_DEFAULT)
    show_exponent = fields.Bool(load_default=SHOW_EXPONENT_DEFAULT)
    debug = fields.Bool(load_default=DEBUG_DEFAULT)
    color = fields.Str(validate=validate_color, load_default=COLOR_DEFAULT)
    output_format = fields.Str(validate=validate_output_format, load_default=OUTPUT_FORMAT_DEFAULT)

    @validates('filename')
    def validate_filename(self, filename, **kwargs):
        if not filename.strip():
            raise ValidationError('A public key file is required.')

    @post_load
    def make_keyaudit_request(self, data, **kwargs):
        return KeyAuditRequest(**data)


class KeyAuditRequest:
    def __init__(self, filename, show_sshfp=SHOW_SSHFP_DEFAULT, show_exponent=SHOW_EXPONENT_DEFAULT,
                 debug=DEBUG_DEFAULT, color=COLOR_DEFAULT, output_format=OUTPUT_FORMAT_DEFAULT):
        """
        A KeyAuditRequest describes one run over one public key file.
        :param filename: The authorized_keys style file to audit.
        :param show_sshfp: Compute SHA-256 fingerprints and print SSHFP records instead of MD5.
        :param show_exponent: Add the RSA public exponent column.
        :param debug: Log decoding details.
        :param color: One of COLOR_OPTIONS, by name.
        :param output_format: One of OUTPUT_FORMAT_OPTIONS, by name.
        """
        self.filename = filename
        self.show_sshfp = show_sshfp
        self.show_exponent = show_exponent
        self.debug = debug
        self.color = COLOR_OPTIONS[color]
        self.output_format = OUTPUT_FORMAT_OPTIONS[output_format]

    def decode_options(self):
        return DecodeOptions(want_sha256=self.show_sshfp, debug=self.debug)

    def use_color(self, is_terminal):
        """
        :param is_terminal: Whether the output stream is a terminal.
        :return: True if ANSI colors should be written.
        """
        if self.color == COLOR_OPTIONS.auto:
            return is_terminal
        return self.color == COLOR_OPTIONS.always

    def __eq__(self, other):
        return self.__dict__ == other.__dict__

"""
.. module: keyaudit.report.json_report
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import json

from marshmallow import Schema, fields


class KeyRecordSchema(Schema):
    line_number = fields.Int()
    key_type = fields.Str()
    modulus_bits = fields.Int()
    exponent = fields.Str()
    fingerprint_md5 = fields.Str()
    fingerprint_sha256 = fields.Str()
    comment = fields.Str()
    type_version = fields.Str()
    failed = fields.Bool()


def write_json_report(records, stream):
    """
    Writes every KeyRecord as one JSON list.
    :return: The number of records written.
    """
    records = list(records)
    stream.write(json.dumps(KeyRecordSchema(many=True).dump(records), indent=2) + '\n')
    return len(records)

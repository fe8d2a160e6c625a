import io
import json
import logging
import os

import pytest

from keyaudit.cli.keyaudit_cli import main, get_parser, load_request
from keyaudit.cli.keyaudit_cli_common import set_logger
from keyaudit.config.keyaudit_config import KeyAuditConfig
from keyaudit.report.table_report import ANSI_GREEN, MD5_HEADER, EXPONENT_HEADER, SSHFP_HEADER
from keyaudit.request.keyaudit_request import COLOR_OPTIONS, OUTPUT_FORMAT_OPTIONS
from tests.ssh.vectors import EXAMPLE_AUTHORIZED_KEYS, EXAMPLE_RSA_PUBLIC_KEY_MD5, EXAMPLE_RSA_PUBLIC_KEY_SHA256

FULL_CONFIG = os.path.join(os.path.dirname(__file__), os.pardir, 'config', 'full.cfg')


class TerminalStringIO(io.StringIO):
    def isatty(self):
        return True


@pytest.fixture
def key_file(tmpdir):
    path = tmpdir.join('authorized_keys')
    path.write(EXAMPLE_AUTHORIZED_KEYS)
    return str(path)


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers = handlers


def test_default_table(key_file):
    stdout = io.StringIO()
    assert 0 == main([key_file], stdout)
    lines = stdout.getvalue().splitlines()
    assert MD5_HEADER == lines[:2]
    assert 7 == len(lines)
    assert EXAMPLE_RSA_PUBLIC_KEY_MD5 in lines[2]
    assert lines[4].startswith('5    ssh-1 ')


def test_exponent_table(key_file):
    stdout = io.StringIO()
    assert 0 == main(['-e', key_file], stdout)
    lines = stdout.getvalue().splitlines()
    assert EXPONENT_HEADER == lines[:2]
    assert ' 65537 ' in lines[2]


def test_sshfp_table(key_file):
    stdout = io.StringIO()
    assert 0 == main(['--sshfp', key_file], stdout)
    lines = stdout.getvalue().splitlines()
    assert SSHFP_HEADER == lines[:2]
    assert '"SSHFP 1 2 {}"'.format(EXAMPLE_RSA_PUBLIC_KEY_SHA256) in lines[2]
    assert '"SSHFP 4 2 ' in lines[3]


def test_json(key_file):
    stdout = io.StringIO()
    assert 0 == main(['-j', '-s', key_file], stdout)
    output = json.loads(stdout.getvalue())
    assert [2, 4, 5, 6, 8] == [r['line_number'] for r in output]
    assert EXAMPLE_RSA_PUBLIC_KEY_SHA256 == output[0]['fingerprint_sha256']


def test_color_follows_terminal(key_file):
    stdout = TerminalStringIO()
    assert 0 == main([key_file], stdout)
    assert ANSI_GREEN in stdout.getvalue()

    stdout = TerminalStringIO()
    assert 0 == main(['--color', 'never', key_file], stdout)
    assert '\033[' not in stdout.getvalue()

    stdout = io.StringIO()
    assert 0 == main(['--color', 'always', key_file], stdout)
    assert ANSI_GREEN in stdout.getvalue()


def test_missing_file(tmpdir):
    stdout = io.StringIO()
    missing = str(tmpdir.join('missing'))
    assert 1 == main([missing], stdout)
    assert 'Error: File not found: {}\n'.format(missing) == stdout.getvalue()


def test_unreadable_file(tmpdir):
    stdout = io.StringIO()
    assert 1 == main([str(tmpdir)], stdout)
    assert stdout.getvalue().startswith('Error reading file: ')


def test_empty_file(tmpdir):
    path = tmpdir.join('authorized_keys')
    path.write('# no keys\n')
    stdout = io.StringIO()
    assert 0 == main([str(path)], stdout)
    assert '' == stdout.getvalue()


def test_invalid_config_option(key_file, monkeypatch):
    monkeypatch.setenv('key_audit_options_color', 'purple')
    stdout = io.StringIO()
    assert 1 == main([key_file], stdout)
    assert stdout.getvalue().startswith('Error: Invalid options: ')


def test_invalid_log_level(key_file, monkeypatch):
    monkeypatch.setenv('key_audit_options_logging_level', 'chatty')
    stdout = io.StringIO()
    assert 1 == main([key_file], stdout)
    assert 'Error: Invalid log level: chatty\n' == stdout.getvalue()


def test_debug_logs_to_stderr(key_file, capsys):
    stdout = io.StringIO()
    assert 0 == main(['-d', key_file], stdout)
    assert 'DEBUG' not in stdout.getvalue()
    assert logging.DEBUG == logging.getLogger().level


def test_usage():
    with pytest.raises(SystemExit) as e:
        get_parser().parse_args([])
    assert 1 == e.value.code


@pytest.mark.parametrize("argv", [
    [],
    ['--color', 'sometimes', 'keys'],
    ['--bogus', 'keys'],
])
def test_usage_error_exits_1(argv, capsys):
    with pytest.raises(SystemExit) as e:
        main(argv, io.StringIO())
    assert 1 == e.value.code
    assert 'usage: keyaudit' in capsys.readouterr().err


def test_command_line_wins_over_config():
    config = KeyAuditConfig(FULL_CONFIG)
    request = load_request(get_parser().parse_args(['--color', 'auto', 'keys']), config)
    assert 'keys' == request.filename
    assert COLOR_OPTIONS.auto == request.color
    # the rest comes from the config file
    assert request.show_sshfp
    assert request.show_exponent
    assert OUTPUT_FORMAT_OPTIONS.json == request.output_format


def test_set_logger():
    config = KeyAuditConfig()
    assert logging.WARNING == set_logger(config).level
    assert logging.DEBUG == set_logger(config, debug=True).level

"""
.. module: keyaudit.config.keyaudit_config
    :copyright: (c) 2016 by The keyaudit developers, see __about__.py for more
    :license: Apache, see LICENSE for more details.
"""
import configparser
import os
import re

KEYAUDIT_OPTIONS_SECTION = 'Key Audit Options'

LOGGING_LEVEL_OPTION = 'logging_level'
LOGGING_LEVEL_DEFAULT = 'WARNING'

SHOW_SSHFP_OPTION = 'show_sshfp'
SHOW_SSHFP_DEFAULT = False

SHOW_EXPONENT_OPTION = 'show_exponent'
SHOW_EXPONENT_DEFAULT = False

DEBUG_OPTION = 'debug'
DEBUG_DEFAULT = False

COLOR_OPTION = 'color'
COLOR_DEFAULT = 'auto'

OUTPUT_FORMAT_OPTION = 'output_format'
OUTPUT_FORMAT_DEFAULT = 'table'


class KeyAuditConfig(configparser.RawConfigParser, object):
    def __init__(self, config_file=None):
        """
        Parses the keyaudit config file, and provides reasonable default values for anything
        absent from it.

        The config file, and the [Key Audit Options] section in it, are entirely optional.
        :param config_file: Path to the config file.
        """
        # getboolean only parses strings
        defaults = {LOGGING_LEVEL_OPTION: LOGGING_LEVEL_DEFAULT,
                    SHOW_SSHFP_OPTION: str(SHOW_SSHFP_DEFAULT),
                    SHOW_EXPONENT_OPTION: str(SHOW_EXPONENT_DEFAULT),
                    DEBUG_OPTION: str(DEBUG_DEFAULT),
                    COLOR_OPTION: COLOR_DEFAULT,
                    OUTPUT_FORMAT_OPTION: OUTPUT_FORMAT_DEFAULT
                    }
        configparser.RawConfigParser.__init__(self, defaults=defaults)
        if config_file:
            self.read(config_file)

        if not self.has_section(KEYAUDIT_OPTIONS_SECTION):
            self.add_section(KEYAUDIT_OPTIONS_SECTION)

    def has_option(self, section, option):
        """
        Checks if an option exists.

        This will search in both the environment variables and in the config file
        :param section: The section to search in
        :param option: The option to check
        :return: True if it exists, False otherwise
        """
        environment_key = self._environment_key(section, option)
        if environment_key in os.environ:
            return True
        else:
            return super(KeyAuditConfig, self).has_option(section, option)

    def get(self, section, option, **kwargs):
        """
        Gets a value from the configuration.

        Checks the environment before looking in the config file.
        :param section: The config section to look in
        :param option: The config option to look at
        :return: The value of the config option
        """
        environment_key = self._environment_key(section, option)
        output = os.environ.get(environment_key, None)
        if output is None:
            output = super(KeyAuditConfig, self).get(section, option, **kwargs)
        return output

    def getoptions(self):
        """
        Returns the [Key Audit Options] section as a dict, in the shape KeyAuditRequestSchema loads.
        :return: dict of option name to value.
        """
        return {
            SHOW_SSHFP_OPTION: self.getboolean(KEYAUDIT_OPTIONS_SECTION, SHOW_SSHFP_OPTION),
            SHOW_EXPONENT_OPTION: self.getboolean(KEYAUDIT_OPTIONS_SECTION, SHOW_EXPONENT_OPTION),
            DEBUG_OPTION: self.getboolean(KEYAUDIT_OPTIONS_SECTION, DEBUG_OPTION),
            COLOR_OPTION: self.get(KEYAUDIT_OPTIONS_SECTION, COLOR_OPTION),
            OUTPUT_FORMAT_OPTION: self.get(KEYAUDIT_OPTIONS_SECTION, OUTPUT_FORMAT_OPTION),
        }

    @staticmethod
    def _environment_key(section, option):
        return (re.sub(r'\W+', '_', section) + '_' + re.sub(r'\W+', '_', option)).lower()

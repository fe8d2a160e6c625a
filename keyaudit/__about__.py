__all__ = [
    "__title__", "__summary__", "__version__", "__author__",
    "__email__", "__license__", "__copyright__",
]

__title__ = "keyaudit"
__summary__ = (
    "keyaudit decodes the public keys of an authorized_keys file and reports their type, size "
    "and fingerprints.")

__version__ = "0.65.0"

__author__ = "The keyaudit developers"
__email__ = "keyaudit@example.com"

__license__ = "Apache License, Version 2.0"
__copyright__ = "Copyright 2016 {0}".format(__author__)

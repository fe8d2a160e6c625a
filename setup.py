import os

from setuptools import setup, find_packages

ROOT = os.path.realpath(os.path.join(os.path.dirname(__file__)))

about = {}
with open(os.path.join(ROOT, "keyaudit", "__about__.py")) as f:
    exec(f.read(), about)

setup(
    name=about["__title__"],
    version=about["__version__"],
    author=about["__author__"],
    author_email=about["__email__"],
    description=about["__summary__"],
    license=about["__license__"],
    packages=find_packages(exclude=["test*"]),
    python_requires='>=3.8',
    install_requires=[
        'marshmallow>=3.13'
    ],
    extras_require={
        'tests': [
            'coverage',
            'cryptography',
            'flake8',
            'pyflakes',
            'pytest',
            'pytest-mock'
        ]
    },
    entry_points={
        'console_scripts': [
            'keyaudit = keyaudit.cli.keyaudit_cli:main'
        ]
    }
)

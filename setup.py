#!/usr/bin/env python3
import os

from setuptools import setup

# fmt: off
here = os.path.dirname(__file__)
version = os.path.join(here, 'foldiff', '_version.py')
scope = {}
# flake8: noqa
exec(open(version).read(), scope)  # pylint: disable=exec-used
version = scope['VERSION']
# fmt: on


def main():
    """Runs setuptools.setup()"""
    scripts = [
        'bin/git-foldiff',
    ]

    packages = ['foldiff', 'foldiff.models', 'foldiff.widgets']

    setup(
        name='foldiff',
        version=version,
        description='A collapsible, multi-file git diff viewer',
        long_description='Browse git changes file by file, expand files to '
        'see syntax-highlighted hunks and jump to the source line.',
        license='GPLv2',
        scripts=scripts,
        packages=packages,
        package_data={'foldiff': ['i18n/*.po']},
        python_requires='>=3.8',
        install_requires=[
            'polib>=1.0.0',
            'Pygments>=2.11',
            'PyQt5>=5.9',
            'QtPy>=1.9',
        ],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts': [
                'foldiff = foldiff.main:main',
            ],
        },
        platforms='any',
    )


if __name__ == '__main__':
    main()

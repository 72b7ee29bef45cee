#!/usr/bin/env python
# encoding: utf-8

from setuptools import setup
import sys

if sys.version_info < (3, 7):
    sys.exit('Sorry, Python < 3.7 is not supported')

exec(open('ffd/version.py').read())

setup(
    name='ffd',
    version=__version__,
    description='Fiscal data format: TLV documents, typed records and JSON exchange form',
    packages=[
        'ffd',
    ],
    platforms=["Linux", "BSD", "MacOS"],
    license='APACHE 2.0',
    python_requires='>=3.7',
    install_requires=[
        'jsonschema',
        'crcmod'
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'ffd = ffd.__main__:main',
        ],
    },
    zip_safe=True,
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
    ],
)

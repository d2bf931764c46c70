#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='protobase',
    version="0.1dev",
    description='protobase: blueprints and super calls on top of prototype delegation',
    packages=find_packages(exclude=["ez_setup"]),
    install_requires=[
        'web.py',
        # web.py imports the cgi module, removed from the stdlib in 3.13
        'legacy-cgi; python_version >= "3.13"',
        'simplejson',
        'PyYAML',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    license="MIT",
    platforms=["any"],
)

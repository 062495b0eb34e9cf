#!/usr/bin/python3
# -*- coding: utf-8 -*-
import os

from setuptools import setup, find_packages


def requirements():
    with open(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'requirements.txt'), 'r') as req:
        return [p.strip() for p in req.readlines() if p.strip()]


setup(
    name='marginmln',
    version='1.0.0',
    description='Max-margin weight learning for Markov logic networks',
    packages=find_packages(exclude=('tests', 'tests.*')),
    python_requires='>=3.7',
    install_requires=requirements(),
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': [
            'mlnlearn = marginmln.mlnlearn:main',
        ],
    },
)

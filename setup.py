# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('langneg', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst', encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='langneg',
    version=metadata['version'],
    description='Language tag matching per RFC 4647',
    long_description=long_description,
    license='MIT',

    python_requires='>= 3.6',
    install_requires=[
        'dominate >= 2.2.0',
    ],
    extras_require={
        'test': [
            'pytest >= 3.0',
        ],
    },

    packages=[
        'langneg',
        'langneg.reports',
        'langneg.util',
    ],
    package_data={
        'langneg.reports': ['html.css'],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Internationalization',
    ],
    keywords='HTTP Accept-Language language tag range RFC 4647 BCP 47',
)

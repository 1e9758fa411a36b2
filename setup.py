# -*- coding: utf-8; -*-

import io
import os

from setuptools import setup


metadata = {}
with io.open(os.path.join('content_encoding', '__metadata__.py'), 'rb') as f:
    exec(f.read(), metadata)            # pylint: disable=exec-used

with io.open('README.rst') as f:
    long_description = f.read()

setup(
    name='ContentEncoding',
    version=metadata['version'],
    description='Parser for the HTTP Content-Encoding header',
    long_description=long_description,
    license='MIT',

    python_requires='>=3.8',
    install_requires=[
        'Brotli >= 1.0.9',
    ],
    extras_require={
        'test': [
            'pytest >= 6.0',
        ],
    },

    packages=[
        'content_encoding',
        'content_encoding.util',
    ],
    entry_points={
        'console_scripts': [
            'content-encoding=content_encoding.cli:main',
        ],
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Programming Language :: Python :: Implementation :: PyPy',
        'Topic :: Internet :: WWW/HTTP',
    ],
)

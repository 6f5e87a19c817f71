#!/usr/bin/env python
# -*- coding: utf-8 -*-

from setuptools import setup


with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read().replace('.. :changelog:', '')

requirements = [
    'oauth2client',
    'httplib2',
    'requests',
]

test_requirements = [
    'mock',
    'rsa',
    'pytest',
    'coverage',
    'flake8',
]


setup(
    name='storage-client',
    version='0.1.0',
    description="Google Cloud Storage JSON API client for hosted scripts",
    long_description=readme + '\n\n' + history,
    author="Gorka Eguileor",
    author_email='gorka@eguileor.com',
    url='https://github.com/Akrog/gcs-client',
    packages=[
        'storage_client',
    ],
    package_dir={'storage_client': 'storage_client', },
    include_package_data=True,
    install_requires=requirements,
    extras_require={'test': test_requirements},
    license="Apache License 2.0",
    zip_safe=False,
    keywords='storage-client gcs',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: Apache Software License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    test_suite='tests',
    tests_require=test_requirements
)

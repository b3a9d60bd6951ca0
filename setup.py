#!/usr/bin/env python
# -*- coding: utf-8 -*-


from setuptools import setup


with open('README.rst') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst') as history_file:
    history = history_file.read().replace('.. :changelog:', '')

requirements = []

test_requirements = [
    'flake8',
    'coverage',
    'mock',
    'pytest',
]


setup(
    name='oss-client',
    version='0.1.0',
    description="Configuration data model for the Aliyun OSS Python client",
    long_description=readme + '\n\n' + history,
    author="Gorka Eguileor",
    author_email='gorka@eguileor.com',
    packages=[
        'oss_client',
        'oss_client.constants',
    ],
    package_dir={'oss_client': 'oss_client', },
    include_package_data=True,
    install_requires=requirements,
    python_requires='>=3.8',
    extras_require={'test': test_requirements},
    license="Apache License 2.0",
    zip_safe=False,
    keywords='oss-client',
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

#!/usr/bin/env python
import codecs
import os.path
import re

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), 'r').read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


install_requires = [line.strip() for line in open(os.path.join(here, 'requirements.txt')).readlines()
                    if line.strip() and not line.startswith('#')]

setup(
    name='annodiff',
    version=find_version("annodiff", "__init__.py"),
    description='Review a working copy against its last committed version with word-level diffs, keeping inline annotations.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    keywords='diff word diff code review annotation git terminal',
    entry_points={"console_scripts": ["annodiff=annodiff:main"]},
    zip_safe=True,
    packages=find_packages(include=['annodiff', 'annodiff.*']),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={'test': ['pytest', 'pytest-mock']},
    license="Apache License 2.0",
    python_requires=">= 3.10",
    classifiers=['Intended Audience :: Developers',
                 'Environment :: Console',
                 'Topic :: Software Development :: Quality Assurance',
                 'Topic :: Software Development :: Version Control :: Git',
                 'Topic :: Text Processing',
                 ],
)

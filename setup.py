#!/usr/bin/env python

import setuptools

readme = open('README.md').read()
requirements = open("requirements.txt").readlines()
test_requirements = open("requirements-test.txt").readlines()

setuptools.setup(
    name = 'insteon-powerline',
    version = '0.1.0',
    description = "Insteon powerline modem device discovery and light control",
    long_description = readme,
    long_description_content_type = "text/markdown",
    author = "",
    author_email = '',
    packages = setuptools.find_packages(exclude=["tests*"]),
    package_data = {'insteon_powerline' : ['data/*.yaml']},
    include_package_data = True,
    install_requires = requirements,
    extras_require = {'test' : test_requirements},
    python_requires = '>=3.7',
    license = "GNU General Public License v3",
    classifiers = [
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
    # avoid eggs
    zip_safe = False,
)

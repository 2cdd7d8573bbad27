# ------------------------------------------------------------------------------
# Name:          setup.py
# Purpose:       install voices21 package
#
# Authors:       Greg Chapman
#
# Copyright:     (c) 2024 Greg Chapman
# License:       MIT, see LICENSE
# ------------------------------------------------------------------------------

import setuptools

# must be kept up to date with voices21/shared/sharedconstants.py:_VOICES21_VERSION
voices21version = '1.0.0'

if __name__ == '__main__':
    setuptools.setup(
        name='voices21',
        version=voices21version,

        description='A music21-extending package that keeps voice IDs (and colors) consistent across measures, systems and pages of a score, and recomputes them incrementally after edits',
        long_description=open('README.md').read(),
        long_description_content_type='text/markdown',

        author='Greg Chapman',
        author_email='gregc@mac.com',

        classifiers=[
            'Development Status :: 4 - Beta',
            'License :: OSI Approved :: MIT License',
            'Programming Language :: Python :: 3 :: Only',
            'Operating System :: OS Independent',
            'Natural Language :: English',
        ],

        keywords=[
            'music',
            'score',
            'notation',
            'voice',
            'voices',
            'tie',
            'ties',
            'music21',
            'OMR',
            'Optical Music Recognition',
        ],

        packages=setuptools.find_packages(include=['voices21', 'voices21.*']),

        python_requires='>=3.10',

        install_requires=[
            'music21>=9.1',
        ],

        extras_require={
            'test': ['pytest'],
        },
    )

# -*- coding: utf-8 -*-
from setuptools import setup, find_packages


tests_require = [
    'pytest>=7.0',
]

setup(
    name='Potion-Client',
    version='0.1.0',
    packages=find_packages(exclude=['*tests*']),
    license='MIT',
    description='Map REST API resources onto Python objects',
    long_description='Declarative resource classes with typed attributes, references between resources and '
                     'permission-gated create and update requests against a pluggable HTTP client.',
    python_requires='>=3.8',
    tests_require=tests_require,
    install_requires=[
        'aniso8601>=9.0',
        'blinker>=1.4',
        'requests>=2.20'
    ],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    zip_safe=False,
    extras_require={
        'tests': tests_require,
    }
)

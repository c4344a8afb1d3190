import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='rentwheels-server',
    version='1.0.0',
    license='MIT',
    description='A REST backend for a car rental marketplace.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-cors>=0.7',
        'uvloop',
        'marshmallow>=3.13',
        'python-jose',
        'tortoise-orm>=0.19',
        'sentry-sdk',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'pytest-aiohttp>=1.0',
            'faker',
        ],
    },
    entry_points={
        'console_scripts': ['rentwheels=rentwheels.cli:run'],
    },
)

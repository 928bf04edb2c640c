"""
Setup configuration for the hypertext-literal package.

This script uses setuptools to package and distribute the hypertext-literal
library. It also reads the requirements and long description directly
from external files for ease of maintenance.
"""
from setuptools import find_packages, setup

VERSION = "0.1.0"


def read_requirements():
    """
    Read requirements from requirements.txt file.
    """
    with open("requirements.txt", encoding="UTF-8") as file:
        return [line.strip() for line in file if line.strip() and not line.startswith("#")]


def get_long_description():
    """
    Read README.md file.
    """
    with open("README.md", encoding="utf8") as file:
        return file.read()


setup(
    name="hypertext-literal",
    description="Build HTML from literals and values with context-aware escaping.",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    license="MIT",
    version=VERSION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=read_requirements(),
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
            "atheris",
        ]
    },
    entry_points={
        "console_scripts": [
            "hypertext-literal=hypertext_literal.cli:cli",
        ]
    },
    python_requires=">=3.11",
)

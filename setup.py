"""
Setup script for the genORM code generator.
"""
from setuptools import setup, find_packages

setup(
    name="genorm",
    version="1.0.0",
    description="Generate a C++ ORM layer for the genORM runtime from a JSON schema",
    packages=find_packages(include=["genorm", "genorm.*"]),
    python_requires=">=3.8",
    install_requires=[
        "jsonschema>=4.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "genorm=genorm.cli:main",
        ],
    },
)

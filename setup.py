from setuptools import setup

setup(
    name="maglevhash",
    version="0.0.1",
    description="maglev consistent hashing",
    author="thejchap",
    packages=["maglevhash"],
    install_requires=[
        "sympy",
        "xxhash",
        "structlog",
        "colorama",
    ],
    extras_require={
        "test": ["pytest"],
        "dev": ["black", "pylint", "flake8", "mypy", "pytest"],
    },
)

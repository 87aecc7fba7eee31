"""Setup file for Usagi package."""
from setuptools import setup, find_packages

setup(
    name="usagi-shopping-list",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "click>=8.1",
        "loguru>=0.7",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "python-dotenv>=1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.1",
        ],
    },
    entry_points={
        "console_scripts": [
            "usagi=usagi.cli.main:main",
        ],
    },
    python_requires=">=3.9",
)

"""Setup script for pathdsl."""
from setuptools import setup, find_packages

setup(
    name="pathdsl",
    version="0.1.0",
    packages=find_packages(include=["pathdsl", "pathdsl.*"]),
    py_modules=["cli"],
    install_requires=[
        "pydantic",
        "python-dotenv",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "pathdsl=cli:main",
        ],
    },
    python_requires=">=3.10",
)

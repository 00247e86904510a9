import os
from setuptools import setup, find_packages

with open(
    os.path.join(
        os.path.dirname(os.path.realpath(__file__)), "sledkv", "requirements.txt"
    )
) as f:
    requirements = f.read().splitlines()

setup(
    name="sledkv",
    version="0.1.0",
    description="Async python client for the sled key-value store",
    packages=find_packages(include=["sledkv", "sledkv.*"]),
    package_data={"sledkv": ["requirements.txt"]},
    python_requires=">=3.8",
    install_requires=requirements,
    extras_require={
        "test": ["pytest", "respx"],
    },
    entry_points={
        "console_scripts": [
            "sledkv = sledkv.cli:sledkv",
        ],
    },
)

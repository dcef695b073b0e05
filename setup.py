# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Setup configuration for ecoflow-authentication package."""

from pathlib import Path

from setuptools import find_packages, setup

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="ecoflow-authentication",
    version="0.1.0",
    author="EcoFlowJS Contributors",
    description="JWT signing, verification, JWKS publishing and Google OAuth steps for EcoFlow pipelines",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.10",
    install_requires=[
        "httpx>=0.27.0",  # For Google OAuth HTTP requests
        "PyJWT>=2.8.0",  # For JWT signing, validation and remote JWKS lookup
        "cryptography>=44.0.1",  # For PEM loading and JWK export
        "pydantic>=2.4.0",  # For OAuth models and the module manifest
        "starlette>=0.49.1",  # For request types and HTTP status codes
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "pylint>=3.0.0",
            "mypy>=1.0.0",
        ],
    },
)

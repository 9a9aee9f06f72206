################################################################################
# TOMLSTASH
#
# @file:        setup.py
# @module:      setup
# @description: Setuptools configuration and CLI packaging for TomlStash.
# @repository:  https://github.com/tomlstash/tomlstash
# @version:     1.0.0
#
# ------------------------------------------------------------------------------
# MIT-Lizenz: siehe LICENSE oder https://opensource.org/licenses/MIT
################################################################################

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description (optional)
readme_file = Path(__file__).parent / "README.md"
long_description = ""
if readme_file.exists():
    long_description = readme_file.read_text(encoding="utf-8")

setup(
    name="tomlstash",
    version="1.0.0",
    description="Local settings store keeping named entries as TOML files",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="TomlStash Contributors",
    author_email="",
    url="https://github.com/tomlstash/tomlstash",
    license="MIT",

    packages=find_packages(exclude=("tests*", "docs*", "examples*")),

    include_package_data=True,
    zip_safe=False,

    python_requires=">=3.10",

    install_requires=[
        "typer>=0.12.0",
        "rich>=13.0.0",
        "pydantic>=2.0.0",
        "tomli-w>=1.0.0",
        "tomli>=2.0.1; python_version < '3.11'",
    ],

    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=3.0.0",
            "black>=22.0.0",
            "flake8>=4.0.0",
            "mypy>=0.950",
        ],
    },

    entry_points={
        "console_scripts": [
            "tomlstash=tomlstash.cli.main:cli_main",
        ],
    },

    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: POSIX :: Linux",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
    ],

    keywords="settings configuration toml store",
)

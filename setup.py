#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Установка пакета simplesky.

Запуск: pip install -e .[test]
"""

from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent


def read_requirements(name: str) -> list:
    lines = (ROOT / name).read_text(encoding="utf-8").splitlines()
    return [line.strip() for line in lines if line.strip() and not line.startswith("#")]


setup(
    name="simplesky",
    version="1.0.0",
    description="Weather for a place name or coordinates: geocoding + forecast API client",
    long_description=(ROOT / "README.md").read_text(encoding="utf-8"),
    long_description_content_type="text/markdown",
    packages=find_packages(include=["simplesky", "simplesky.*"]),
    python_requires=">=3.9",
    install_requires=read_requirements("requirements.txt"),
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ]
    },
)

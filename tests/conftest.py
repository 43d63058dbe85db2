"""Pytest configuration for the test vector suite.

Hypothesis profiles:
- dev: local runs (200 examples)
- ci: CI=true in the environment (50 examples, derandomized)
"""

import os
import pathlib

import pytest
from hypothesis import settings

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "ci" if os.environ.get("CI") else "dev"))

DATA = pathlib.Path(__file__).resolve().parent / "data"


@pytest.fixture
def data_dir():
    return DATA


@pytest.fixture
def write_vectors(tmp_path):
    """Write a vector file under tmp_path and return its name."""
    def write(text, name="vectors.txt"):
        (tmp_path / name).write_text(text, encoding="utf-8")
        return name
    return write

"""Shared test fixtures for corner."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from corner.core.decoration import get_stack_provider, set_stack_provider
from corner.core.registry import VARIANTS
from corner.core.source_cache import default_cache, set_default_cache

SAMPLE_SOURCE = """\
# Sample module
import json


def parse_input(value):
    \"\"\"Parse user input.\"\"\"
    if not value:
        return None
    return int(value)  # line 9


def other_func():
    pass
"""


@pytest.fixture(autouse=True)
def restore_globals() -> Iterator[None]:
    """Restore process-wide state that tests may replace."""
    provider = get_stack_provider()
    cache = default_cache()
    variants = VARIANTS.items()
    default = VARIANTS.default

    yield

    set_stack_provider(provider)
    set_default_cache(cache)
    VARIANTS.clear()
    for variant, decoration in variants:
        VARIANTS.register(variant, decoration)
    VARIANTS.default = default


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Write a small Python module and return its path."""
    path = tmp_path / "sample.py"
    path.write_text(SAMPLE_SOURCE)
    return path


@pytest.fixture
def numbered_file(tmp_path: Path) -> Path:
    """Write a 20-line file whose lines read 'line 1' .. 'line 20'."""
    path = tmp_path / "numbered.txt"
    path.write_text("".join(f"line {i}\n" for i in range(1, 21)))
    return path

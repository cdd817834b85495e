"""Shared pytest fixtures for cover tests."""

import json

import pytest

from kdp_cover.cover.geometry import CoverSpec, SpineGeometryCalculator


@pytest.fixture
def calculator():
    """Calculator with the default KDP print spec."""
    return SpineGeometryCalculator()


@pytest.fixture
def spec_6x9():
    """200-page white paperback at 6x9."""
    return CoverSpec(page_count=200, trim_size="6x9", paper_color="white", binding_type="paperback")


@pytest.fixture
def write_json(tmp_path):
    """Write a dict as JSON under tmp_path and return the path."""
    def _write(data, name="print_spec.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write

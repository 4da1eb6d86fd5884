# Shared fixtures: write a _brand.yml into a throwaway project directory.

from pathlib import Path

import pytest
import yaml

from brand_sass.brand import Brand, ProjectContext


@pytest.fixture
def write_brand(tmp_path):
    """Write `data` as <tmp>/<subdir>/_brand.yml and return its path."""

    def _write(data, subdir: str = "") -> Path:
        target = tmp_path / subdir if subdir else tmp_path
        target.mkdir(parents=True, exist_ok=True)
        path = target / "_brand.yml"
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def project(tmp_path):
    return ProjectContext(tmp_path)


@pytest.fixture
def make_brand(tmp_path):
    def _make(data, brand_dir=None) -> Brand:
        return Brand.from_dict(data, brand_dir=brand_dir or tmp_path, project_dir=tmp_path)

    return _make

from __future__ import annotations

import json
from pathlib import Path

import pytest

DATA = Path(__file__).resolve().parent / "data"


def load_text(name: str) -> str:
    return (DATA / name).read_text(encoding="utf-8")


def load_json(name: str):
    return json.loads(load_text(name))


@pytest.fixture
def data_dir() -> Path:
    return DATA


@pytest.fixture
def page001() -> str:
    return load_text("page001.html")


@pytest.fixture
def page002() -> str:
    return load_text("page002.html")


@pytest.fixture
def page003() -> str:
    return load_text("page003.html")


@pytest.fixture
def json_doc():
    """Factory: parsed contents of a JSON document under tests/data."""
    return load_json

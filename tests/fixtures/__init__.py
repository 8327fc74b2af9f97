"""Shared test fixtures."""

import json
from pathlib import Path

STUBS_DIR = Path(__file__).parent / "stubs"


def load_stub(name: str) -> str:
    """Return the raw text of a JSON stub file."""
    return (STUBS_DIR / name).read_text()


def load_stub_json(name: str):
    return json.loads(load_stub(name))

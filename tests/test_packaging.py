import re
from pathlib import Path

import monitree


SETUP_PY = Path(__file__).resolve().parents[1] / "setup.py"


def _setup_field(name: str) -> str:
    match = re.search(rf"{name}='([^']*)'", SETUP_PY.read_text(encoding="utf-8"))
    assert match is not None, f"{name} missing from setup.py"
    return match.group(1)


def test_setup_version_matches_package():
    assert _setup_field("version") == monitree.__version__


def test_setup_metadata_names_this_project():
    assert _setup_field("name") == "monitree"
    assert _setup_field("author") == "monitree developers"
    text = SETUP_PY.read_text(encoding="utf-8")
    assert "example.com" not in text
    assert "YourUsername" not in text

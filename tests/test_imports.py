"""
Verify that every guitar_tools module imports cleanly.
"""

import importlib
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).parent.parent / "guitar_tools"


def _module_names():
    names = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        parts = path.relative_to(PACKAGE_ROOT.parent).with_suffix("").parts
        if parts[-1] == "__main__":
            continue
        if parts[-1] == "__init__":
            parts = parts[:-1]
        names.append(".".join(parts))
    return names


@pytest.mark.parametrize("module_name", _module_names())
def test_module_imports(module_name):
    try:
        importlib.import_module(module_name)
    except OSError as e:
        pytest.skip(f"PortAudio library not available: {e}")

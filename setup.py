"""
Build script for sublimehtml.

The serializer can optionally be compiled with mypyc:

    SUBLIMEHTML_USE_MYPYC=1 pip install .

Without the variable a pure Python wheel is built.
"""

import os
import sys
from pathlib import Path

from setuptools import setup

USE_MYPYC = os.environ.get("SUBLIMEHTML_USE_MYPYC", "0") == "1"

# node.py and urls.py stay interpreted: mypyc rejects object.__setattr__ on
# frozen dataclasses.
MYPYC_MODULES = [
    "src/sublimehtml/serialize.py",
]


def build_with_mypyc() -> list:
    """Return the mypyc extension modules, or exit if mypyc is unavailable."""
    try:
        from mypyc.build import mypycify
    except ImportError:
        print("ERROR: mypyc is not installed. Install with: pip install sublimehtml[mypyc]", file=sys.stderr)
        sys.exit(1)

    missing = [path for path in MYPYC_MODULES if not Path(path).exists()]
    if missing:
        print(f"ERROR: Modules not found: {', '.join(missing)}", file=sys.stderr)
        sys.exit(1)

    print(f"Compiling {len(MYPYC_MODULES)} sublimehtml modules with mypyc")
    return mypycify(
        MYPYC_MODULES,
        opt_level=os.environ.get("MYPYC_OPT_LEVEL", "3"),
        debug_level=os.environ.get("MYPYC_DEBUG_LEVEL", "0"),
        separate=False,
        multi_file=False,
    )


if __name__ == "__main__":
    setup(ext_modules=build_with_mypyc() if USE_MYPYC else [])

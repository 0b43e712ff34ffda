#!/usr/bin/env python3
"""
mezasi development entry point.

Runs the CLI from a source checkout without installing the package.

Usage:
    python cli.py --help
    python cli.py list
    python cli.py --endpoint http://localhost:8080/api/ info vm1
"""

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from mezasi.cli.app import run  # noqa: E402

if __name__ == "__main__":
    run()

#!/usr/bin/env python3
"""
reclaw-cli entry script.

Runs the client from a source checkout without installing it.
The installed console script (reclaw-cli) points at the same app.

Usage:
    python cli.py --help
    python cli.py health
    python cli.py --json info
    python cli.py rpc system.healthz --params '{}'
"""

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from reclaw_cli.cli.app import app

if __name__ == "__main__":
    app()

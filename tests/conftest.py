"""
Pytest configuration for the MenuBot suite.

Puts the project root on sys.path so the flat packages (app, domain,
services, ...) import without installation, and switches settings to the
testing environment before any application module is loaded.
"""

import os
import sys
from pathlib import Path

os.environ.setdefault("ENVIRONMENT", "testing")

project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

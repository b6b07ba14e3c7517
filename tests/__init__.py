# tests/__init__.py
"""Root test package."""
from pathlib import Path

TEST_DIR = Path(__file__).parent

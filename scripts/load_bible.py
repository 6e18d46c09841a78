#!/usr/bin/env python3
"""Load the Bible JSON document into the libros, capitulos and versiculos tables."""
import sys
from pathlib import Path

# Ensure the backend package is importable when the script is run directly.
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

from app.loader import main  # noqa: E402


if __name__ == "__main__":
    sys.exit(main())

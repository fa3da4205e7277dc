#!/usr/bin/env python3
"""Create or update Atlas Search / Vector indexes from config/indexes/*.json (run from repo root)."""
import sys
import os

# Allow running from repo root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from search_indexes.cli import main


if __name__ == "__main__":
    sys.exit(main())

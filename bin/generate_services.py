#!/usr/bin/env python3
"""
Twirp Binding Generator

Usage:
    python generate_services.py services.json --output generated/services_twirp.py
"""

import sys
from pathlib import Path

# Add parent directory to path so twirpgen package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from twirpgen.cli import main


if __name__ == "__main__":
    sys.exit(main())

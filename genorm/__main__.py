#!/usr/bin/env python3
"""
Enable running the generator module directly:
    python -m genorm config.json
"""
from .cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())

#!/usr/bin/env python3
"""
genORM Code Generator CLI

Usage:
    genorm config.json
    genorm config.json -v
    python -m genorm config.json
"""

import argparse
import logging
import sys

from ._logging import configure_logging
from .config import load_config
from .generator import generate
from .types import GenOrmError


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate a C++ ORM layer from a genORM config document',
        prog='genorm'
    )
    parser.add_argument(
        'config',
        nargs='?',
        help='Path to the JSON config document'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Print verbose output'
    )
    
    # Trailing arguments after the config path are ignored
    args, _ = parser.parse_known_args(argv)
    
    if args.config is None:
        print("Usage: genorm CONFIG-JSON", file=sys.stderr)
        return 1
    
    configure_logging(level=logging.DEBUG if args.verbose else logging.WARNING)
    
    try:
        config = load_config(args.config)
        
        if args.verbose:
            print(f"Loaded {args.config}")
            print(f"  Version: {config.version}")
            print(f"  Object types: {', '.join(t.name for t in config.object_types)}")
        
        artifacts = generate(config)
        
        if artifacts is not None:
            print(f"Generated: {artifacts.declaration_path}")
            print(f"Generated: {artifacts.definition_path}")
        
        return 0
        
    except GenOrmError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())

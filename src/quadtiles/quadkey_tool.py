#!/usr/bin/env python3
"""
Quadkey Tool - Main Entry Point
Converts map tiles between x/y/zoom coordinates and quadkeys
"""

import sys

from quadtiles.core.quadkey_manager import QuadKeyManager


def main():
    """Main entry point for the quadkey tool"""
    try:
        sys.exit(QuadKeyManager.run_from_command_line())
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        sys.exit(1)


if __name__ == "__main__":
    main()

"""Run with: python -m conceptmap [--demo]"""
import sys

from conceptmap.main import main

if __name__ == "__main__":
    sys.exit(main())

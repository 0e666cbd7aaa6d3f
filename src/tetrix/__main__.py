"""
Run with: python -m tetrix
"""
import sys

from tetrix.main import main

if __name__ == "__main__":
    sys.exit(main())

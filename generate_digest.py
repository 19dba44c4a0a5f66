#!/usr/bin/env python3
"""Entry point for the scheduled job: python generate_digest.py [--date YYYY-MM-DD]"""

from deepread.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""CLI entry point for printing the current gold rate."""

from __future__ import annotations

import sys

from gold_bharat.fetch_rate import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())

"""CLI entry point for converting CSV rows."""

from __future__ import annotations

from fx_converter.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()

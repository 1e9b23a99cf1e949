"""Console entry point: ``python -m steamapp``."""

from __future__ import annotations

from steamapp.main import main

if __name__ == "__main__":
    main()

from __future__ import annotations

from markdown_marker.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

# cutlist_solver/__main__.py
# Package entrypoint so you can run:
#   python -m cutlist_solver --help
#
# Examples:
#   python -m cutlist_solver --job job.json
#   python -m cutlist_solver --example --algorithm shelf --verbose

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()

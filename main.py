"""Flatten an include tree from a checkout without installing the package."""

from include_flattener.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

"""Module entry point for `python -m yaml_structure_validator`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

"""Module entry point for `python -m robot_build_step`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

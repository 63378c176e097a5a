"""Module entry point for `python -m k8s_schema_browser`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

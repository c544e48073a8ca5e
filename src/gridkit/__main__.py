"""Entry point for ``python -m gridkit``."""

from __future__ import annotations


def main() -> int:
    """Run the gridkit CLI."""
    from gridkit.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())

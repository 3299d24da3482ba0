"""Entry point for ``python -m calc_engine``."""

from calc_engine.cli import main

main()

"""Allow ``python -m wgraph``."""

from wgraph.cli import main

main()

"""Allow ``python -m product_viewer``."""

from product_viewer.tui.app import main

main()

"""Allow ``python -m authflow``."""

from authflow import main

main()

"""Allow running the action with ``python -m crowdin_progress``."""

from . import main

main()

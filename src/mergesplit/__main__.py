"""Allow running MergeSplit with ``python -m mergesplit``."""

import sys

from .cli import main

sys.exit(main())

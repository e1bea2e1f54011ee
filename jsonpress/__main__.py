"""Entry point for ``python -m jsonpress``."""

import sys

from .cli import main

sys.exit(main())

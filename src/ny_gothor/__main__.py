"""Allow ``python -m ny_gothor``."""

import sys

from ny_gothor.cli import main

sys.exit(main())

"""Allow ``python -m citekit``."""

import sys

from citekit.cli import main

sys.exit(main())

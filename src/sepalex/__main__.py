"""Allow ``python -m sepalex``."""

import sys

from sepalex.cli import main

sys.exit(main())

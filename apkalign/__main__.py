"""Allow ``python -m apkalign``."""

import sys

from .cli import main

sys.exit(main())

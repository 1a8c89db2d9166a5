"""Allow ``python -m tokenless.calculator``."""

import sys

from .repl import main

sys.exit(main())

"""Allow ``python -m kartcup``."""

import sys

from kartcup.cli import main

sys.exit(main())

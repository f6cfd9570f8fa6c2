"""Allow ``python -m autofocus``."""

import sys

from autofocus.cli.main import main

sys.exit(main())

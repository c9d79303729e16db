"""Allow ``python -m creator_catalog``."""

import sys

from .main import main

sys.exit(main())

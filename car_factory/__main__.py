"""Allow ``python -m car_factory``."""

import sys

from .driver import main

sys.exit(main())

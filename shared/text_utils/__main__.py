"""Allow ``python -m text_utils``."""

import sys

from .cli import main


sys.exit(main())

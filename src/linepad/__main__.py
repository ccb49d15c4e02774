"""Allow ``python -m linepad PATH``."""

import sys

from linepad.adapters.textual.app import main

sys.exit(main())

"""Allow ``python -m musicmap.cli`` execution."""

import sys

from musicmap.cli.recommend import main

sys.exit(main())

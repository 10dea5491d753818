"""Allow ``python -m optclaim``."""

import sys

from optclaim.cli.main import main

sys.exit(main())

"""Allow running as: python -m oracle_cmdref"""

import sys

from oracle_cmdref.cli import main

sys.exit(main())

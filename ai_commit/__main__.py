"""Allow running as: python -m ai_commit"""

import sys

from ai_commit.cli.main import main

sys.exit(main())

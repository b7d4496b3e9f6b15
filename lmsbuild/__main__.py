"""Allow ``python -m lmsbuild``."""

import sys

from lmsbuild.cli import main


sys.exit(main())

import sys

from rounding_audit.cli import main

sys.exit(main())

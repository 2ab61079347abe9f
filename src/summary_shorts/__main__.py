import sys

from summary_shorts.cli import main

sys.exit(main())

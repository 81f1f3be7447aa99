import sys

from wordhord.cli import main

sys.exit(main())

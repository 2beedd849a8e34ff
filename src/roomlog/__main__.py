import sys

from roomlog.cli import main

sys.exit(main())

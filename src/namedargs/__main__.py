import sys

from namedargs.cli import main

sys.exit(main())

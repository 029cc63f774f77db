import sys

from fxrates.app import main

sys.exit(main())

import sys

from pymolmass.cli import main

sys.exit(main())

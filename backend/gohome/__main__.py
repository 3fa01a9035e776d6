import sys

from gohome.cli import main

sys.exit(main())

import sys

from filecombiner.cli.main import main

sys.exit(main())

import sys

from packageGraph.cli import main

sys.exit(main())

import sys

from list_bench.cli import main

sys.exit(main())

import sys

from repo_inspect.cli import main

sys.exit(main())

import sys

from dctui.cli import main

sys.exit(main())

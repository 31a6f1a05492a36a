import sys

from todolist.cli import main

sys.exit(main())

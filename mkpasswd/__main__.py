import sys

from mkpasswd.cli import main

sys.exit(main())

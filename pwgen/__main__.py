"""Allow ``python -m pwgen``."""

import sys

from pwgen.cli import main

if __name__ == '__main__':
    sys.exit(main())

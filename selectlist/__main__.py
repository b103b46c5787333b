"""
Module: selectlist.__main__

Allows running the application with ``python -m selectlist``.
"""

import sys

from selectlist.main import main

if __name__ == "__main__":
    sys.exit(main())

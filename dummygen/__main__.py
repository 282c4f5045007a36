import sys

from dummygen.cli import main

sys.exit(main())

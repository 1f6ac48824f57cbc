import sys

from seqguard.cli import main

sys.exit(main())

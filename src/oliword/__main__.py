import sys

from _oliword.cli import main

sys.exit(main())

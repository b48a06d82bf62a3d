import sys

from morsewave.cli import main

sys.exit(main())

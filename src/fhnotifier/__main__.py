import sys

from fhnotifier.cli import main

sys.exit(main())

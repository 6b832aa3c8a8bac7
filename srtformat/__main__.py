import sys

from srtformat.cli import main

sys.exit(main())

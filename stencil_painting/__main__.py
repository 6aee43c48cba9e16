import sys

from stencil_painting.cli import main

sys.exit(main())

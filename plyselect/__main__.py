import sys

from plyselect.cli.main import main


sys.exit(main())

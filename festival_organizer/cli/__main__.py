"""Allow ``python -m festival_organizer.cli`` execution."""

import sys

from festival_organizer.cli.list_festivals import main

sys.exit(main())

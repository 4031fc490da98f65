"""Allow ``python -m festival_organizer`` execution (one-shot listing)."""

import sys

from festival_organizer.cli.list_festivals import main

sys.exit(main())

"""Run fetch-meetup-data from a source checkout without installing the package."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from meetup_data.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
"""
Parse chat directives in a message from a fray source checkout.

Reports @mentions, @agent#session forks and !@agent interrupts for a body
given on the command line or stdin, e.g. from a chat hook:

    scripts/parse_mentions.py --body "$MESSAGE" --agents-dir agents --format json
"""

import sys
from pathlib import Path

# Add src to path for direct script execution
if __name__ == "__main__":
    src_path = Path(__file__).parent.parent / "src"
    if src_path.exists():
        sys.path.insert(0, str(src_path))

    from fray.cli.mentions import main

    sys.exit(main())

import sys

from vscode_marketplace.cli import main

sys.exit(main())

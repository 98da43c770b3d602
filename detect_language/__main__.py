import sys

from detect_language_cli.main import main

sys.exit(main())

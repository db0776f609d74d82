import sys

from htma_scanner.main import main

sys.exit(main())

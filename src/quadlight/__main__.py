import sys

from quadlight.main import main

sys.exit(main())

import sys

from lanbeam.main import main

sys.exit(main())

import sys

from folds.app import main


sys.exit(main())

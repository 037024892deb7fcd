import sys

from mallet.repl import main

sys.exit(main())

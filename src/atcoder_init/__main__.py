import sys

from atcoder_init.cli import main

sys.exit(main())

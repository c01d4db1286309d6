import sys

from uni.cli_main import main

sys.exit(main())

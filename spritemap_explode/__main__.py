import sys

from spritemap_explode.cli import main

sys.exit(main())

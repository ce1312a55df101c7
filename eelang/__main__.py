import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from eelang.cmdline import main

main()

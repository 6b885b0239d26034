# main.py
import sys

from cav_route.cli import main

if __name__ == "__main__":
    # e.g. python main.py search generated5000-1.cav
    sys.exit(main())

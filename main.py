"""xoroshiro128+ runner — Entry Point.

Usage: python main.py --seed 42 --count 5 [--range MIN MAX] [--hex]
"""

import sys

from xoroshiro.cli import main


if __name__ == "__main__":
    sys.exit(main())

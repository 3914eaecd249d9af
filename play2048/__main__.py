import sys

from play2048.play import main

if __name__ == '__main__':
    sys.exit(main())

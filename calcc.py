#!/usr/bin/env python3

import sys
from calc.driver import main

if __name__ == '__main__':
    sys.exit(main())

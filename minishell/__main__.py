#!/usr/bin/env python3
# minishell/__main__.py
from __future__ import annotations

import sys

from minishell.app import main

if __name__ == "__main__":
    sys.exit(main())

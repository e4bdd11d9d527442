#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
PyOBB Main Entry Point
----------------------
When run as `pyobb` or `python -m pyobb`, dispatches to the command line
interface in pyobb.cli.
"""

import sys

from pyobb.cli import main

if __name__ == "__main__":
    sys.exit(main())

#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
python -m maze_solver 入口
"""

import sys

from maze_solver.main import main

sys.exit(main())

"""
Shared test setup for the vaultkv_core test suite.

Puts core/ and scripts/ on sys.path so the suite runs from a plain
checkout as well as from an editable install.
"""

import os
import sys

_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(_ROOT, 'core'))
sys.path.insert(0, os.path.join(_ROOT, 'scripts'))

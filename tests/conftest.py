import sys, os

# Ensure the repo root is on path for test imports (flat module layout)
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from tests.helpers import FirstRng, reachable_from

__all__ = [
    "FirstRng",
    "reachable_from",
]

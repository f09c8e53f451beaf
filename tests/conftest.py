import os
import sys

# The modules live at the repository root; make them importable from tests
# regardless of the directory pytest is started from.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

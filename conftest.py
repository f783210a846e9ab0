from pathlib import Path
import sys

# Make `components` importable when tests run from a plain checkout
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import os
import sys
from pathlib import Path

# Keep tests deterministic and fast: no artificial latency, no rate limiting.
os.environ.setdefault("ANALYSIS_DELAY_SECONDS", "0")
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

"""Runtime defaults, overridable through ``KLOTSKI_*`` environment variables."""

import os

# ======= Logging =======
LOG_LEVEL = os.getenv("KLOTSKI_LOG_LEVEL", "WARNING").upper()

# ======= Search =======
STRATEGY = os.getenv("KLOTSKI_STRATEGY", "iterative").lower()

# Expanded nodes between DEBUG progress lines.
PROGRESS_INTERVAL = int(os.getenv("KLOTSKI_PROGRESS_INTERVAL", "10000"))

# ======= Frontends =======
ANIMATION_DELAY = float(os.getenv("KLOTSKI_ANIMATION_DELAY", "0.15"))
STOCK_PUZZLE = os.getenv("KLOTSKI_STOCK_PUZZLE", "classic")

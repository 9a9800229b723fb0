"""Service configuration read from the environment.

CATALOG_PROFILES_DATA_DIR is where dataset records are read from and where
updates are written. Without it the bundled sample records inside the
package are served, and updates are written into the installed package.
Set it for any deployment that accepts updates.
"""

import os
from pathlib import Path

BUNDLED_DATA_DIR = Path(__file__).parent / "datasets" / "definitions"

DATA_DIR = Path(os.environ.get("CATALOG_PROFILES_DATA_DIR", str(BUNDLED_DATA_DIR)))
LOG_LEVEL = os.environ.get("CATALOG_PROFILES_LOG_LEVEL", "INFO").upper()
PORT = int(os.environ.get("CATALOG_PROFILES_PORT", "8001"))

"""Root conftest: sets env vars BEFORE any xgen module is imported.

load_settings() reads $XGEN_DIR and the XGEN_* overrides, so point the config
directory at an empty temp dir and drop overrides leaking in from the shell.
"""

import os
import tempfile

# Force-set (not setdefault) to prevent real env vars from leaking into tests
os.environ["XGEN_DIR"] = tempfile.mkdtemp(prefix="xgen-test-")
for _name in ("XGEN_DEFAULT_PLATFORM", "XGEN_PLAYGROUND_NAME", "XGEN_LOG_LEVEL"):
    os.environ.pop(_name, None)

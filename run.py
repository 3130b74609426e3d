#!/usr/bin/env python
"""
Entry point for running the fast-cc-hooks commit-msg validator from a checkout.

This script sets up the Python path and runs the hook. Install it as
``.git/hooks/commit-msg`` or call it directly:

    python run.py .git/COMMIT_EDITMSG
"""

import sys
from pathlib import Path

# Add src directory to Python path
project_root = Path(__file__).parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

# Check for required dependencies
try:
    import dotenv  # noqa: F401
    import yaml  # noqa: F401
except ImportError as e:
    print(f"""
Error: Missing required dependencies

{e}

Please make sure you have activated your virtual environment and installed dependencies:

    pip install -e .

Then try running again:
    python run.py <commit-msg-file>
""", file=sys.stderr)
    sys.exit(2)

from fastcc.main import main


if __name__ == "__main__":
    sys.exit(main())

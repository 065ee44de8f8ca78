"""Allow ``python -m planetstore``."""

from __future__ import annotations

# Local Imports
from . import main

main()

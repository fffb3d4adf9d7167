from __future__ import annotations

"""
Domain Constants.

Names shared by the traversal core, the configuration layer and the CLI.
"""

from typing import Tuple

ON_ERROR_SKIP = "skip"
ON_ERROR_RAISE = "raise"
ON_ERROR_CHOICES: Tuple[str, ...] = (ON_ERROR_SKIP, ON_ERROR_RAISE)

DEFAULT_ON_ERROR = ON_ERROR_SKIP

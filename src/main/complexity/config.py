"""
Configuration settings for complexity scoring.
"""

from typing import Dict, Tuple

# Penalty per construct category
WEIGHTS: Dict[str, int] = {
    "branch": 10,
    "branch_empty": 1,
    "fn": 3,
    "call": 1,
}

# Reporting
DEFAULT_THRESHOLD: int = 50
DEFAULT_EXTENSIONS: Tuple[str, ...] = (".js", ".cjs", ".mjs")
ROOT_SIGNATURE: str = "*"
ANONYMOUS_SIGNATURE: str = "anonymous"

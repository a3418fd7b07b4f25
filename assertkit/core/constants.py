"""Global constants.

Default tolerances and diagnostic limits shared by every comparator.
"""

# ============================================================
# Tolerances
# ============================================================

DEFAULT_ABSOLUTE_TOL = 1e-4
DEFAULT_RELATIVE_TOL = 1e-4


# ============================================================
# Diagnostics
# ============================================================

# Maximum number of mismatching positions listed in a sequence report
MAX_OUTPUT_LINES = 10

SEPARATOR = "-" * 32


# ============================================================
# Configuration file
# ============================================================

DEFAULT_CONFIG_FILE = "assertkit.yaml"

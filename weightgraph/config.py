"""
Configuration constants for weightgraph.

Algorithm components read their defaults from here; every value can also be
overridden per call or per component.
"""

import math

# =============================================================================
# Shortest Path / Spanning Tree
# =============================================================================

# Tentative distance (or key) of a vertex no edge has reached yet; no finite
# edge weight or path total can reach it
UNREACHABLE_DISTANCE = math.inf

# =============================================================================
# Path Enumeration
# =============================================================================

# Maximum number of edges in a path listed by exhaustive enumeration
DEFAULT_MAX_PATH_DEPTH = 10

"""Global constants used throughout the application.

This module centralizes the pagination limits, filter field names and error
codes shared by the filters, models and page services.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_APPLICATION_NOT_FOUND = "APPLICATION_NOT_FOUND"
ERROR_CODE_DEPLOYMENT_NOT_FOUND = "DEPLOYMENT_NOT_FOUND"

# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE_NO = 1
DEFAULT_PAGE_SIZE = 10
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 500

PAGE_NO_KEY = "page_no"
PAGE_SIZE_KEY = "page_size"
PAGINATION_KEYS: Final[frozenset[str]] = frozenset({PAGE_NO_KEY, PAGE_SIZE_KEY})

# ============================================================================
# Filter Constraints
# ============================================================================

# Shown by the ID picker for replicas without a name; means "no filter".
FILTER_PLACEHOLDER = "-"

REPLICA_ID_FIELD = "replica_id"
STATE_FIELD = "state"

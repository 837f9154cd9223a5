"""
Constants and default values for model conversions and API requests.

This module centralizes the default values and fallbacks used when
converting API responses to models, and the fixed request parameters of
the Confluence REST API, so the rest of the codebase has no magic strings.
"""

#
# Common defaults
#
EMPTY_STRING = ""

#
# Confluence defaults
#
CONFLUENCE_DEFAULT_ID = "0"
CONFLUENCE_DEFAULT_VERSION = 0

#
# Request parameters
#
CONTENT_TYPE_PAGE = "page"
STORAGE_REPRESENTATION = "storage"

# Expansions for GET /content/{id}
PAGE_METADATA_EXPAND = "version,title"
PAGE_CONTENT_EXPAND = "body.storage,version"

# Search defaults
DEFAULT_SEARCH_LIMIT = 10
DEFAULT_SEARCH_EXPAND = "body.storage,version,space"

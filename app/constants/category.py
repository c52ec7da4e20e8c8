from typing import Any, Dict, List

# Identifier stamped onto every created category
ASSIGNED_CATEGORY_ID = 55

# The only identifier the delete endpoint reports as found
DELETABLE_CATEGORY_ID = 8081

# Path ids are unsigned 64-bit integers
MAX_CATEGORY_ID = 2**64 - 1

# Categories returned by the list endpoint, in order
SAMPLE_CATEGORIES: List[Dict[str, Any]] = [
    {"id": 1, "name": "Category 1", "url": "http://example.com", "icon": "icon1"},
    {"id": 2, "name": "Category 2", "url": "http://example.com", "icon": "icon2"},
]

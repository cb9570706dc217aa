"""cachegraph: read-through, write-invalidating cache for collaboration graph repositories.

Every cached repository wraps an authoritative repository and keeps the
central Redis cache coherent with it: reads populate the cache on a miss,
writes invalidate their own keys plus the key families of related entities
before the authoritative write is attempted.
"""

import logging

__version__ = "0.1.0"

# Silent until the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())

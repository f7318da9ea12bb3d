"""strseq

Ordered sequences of string-encoded values with list-style helpers
(append, insert, remove, pop, membership, count, union, sum/min/max) and
explicit, pluggable coercion to integers, booleans and strings.
"""

from strseq.domain.sequence import OrderedStringSequence

__all__ = ["OrderedStringSequence", "__version__"]
__version__ = "0.1.0"

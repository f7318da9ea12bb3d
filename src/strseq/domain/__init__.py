"""Domain layer for strseq.

Contains the `OrderedStringSequence` value type, the coercion policies it
relies on, and the domain error hierarchy. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `strseq.adapters` or `strseq.entrypoints`.
"""

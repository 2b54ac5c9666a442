"""Schema contract: models, file loading/caching, and read-only lookups.

The translation engine treats a `SchemaContract` as an immutable snapshot per call; loading and
refreshing it is the job of `semantic_query.contract.loader`.
"""

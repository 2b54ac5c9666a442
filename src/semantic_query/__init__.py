"""Semantic query translation over a legacy schema contract.

`semantic_query.engine.translate` turns a short natural-language description into a parameterized
SQL statement by resolving business vocabulary against a `SchemaContract`.
"""

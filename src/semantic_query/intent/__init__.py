"""Intent parsing and validation.

The intent layer converts a short English request into a strict `ParsedIntent`, which is then
resolved against the schema contract to build deterministic, parameterized SQL.
"""

"""Name resolution and value mapping against the schema contract."""

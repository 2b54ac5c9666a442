"""Process configuration: environment settings and logging."""

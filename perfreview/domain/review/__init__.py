"""Performance review cycle bounded context."""

"""Small helpers with no service dependencies."""

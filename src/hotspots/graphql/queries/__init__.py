"""Root query type."""

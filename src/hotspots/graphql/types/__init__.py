"""GraphQL object and result types."""

"""
GraphQL resolvers package
"""

# Resolvers are imported lazily by the root Query and Mutation types

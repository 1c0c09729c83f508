"""Resolver package for the GraphQL schema.

Each module reads and writes the EntityStore found in the GraphQL context
and converts store records into the GraphQL types.
"""

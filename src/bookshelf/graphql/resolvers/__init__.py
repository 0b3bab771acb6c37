"""Resolver package for GraphQL schema.

Resolvers are plain functions referenced by the root query type; each lives
in the sibling module named after the type it produces.
"""

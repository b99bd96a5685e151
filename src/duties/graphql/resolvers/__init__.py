"""Resolver package for the GraphQL schema.

Resolvers return ``Result`` values; the root query and mutation types turn
``Err`` results into GraphQL errors.
"""

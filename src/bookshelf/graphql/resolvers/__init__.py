"""Resolver package for GraphQL schema.

Resolvers read the book store from the request context and dispatch through
the operation table in ``bookshelf.operations``.
"""

"""Resolver service client"""
from infrastructure.adapters.output.resolver.http_resolver_client import HttpResolverClient

__all__ = ['HttpResolverClient']

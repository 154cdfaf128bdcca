"""Ports (interfaces) for the ports-and-adapters architecture."""

from opentransport.domain.ports.query_gateway import QueryGateway, ResultT

__all__ = ["QueryGateway", "ResultT"]

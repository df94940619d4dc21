"""Persistence Gateways"""
from .dynamodb_attributes_repository import DynamoDBAttributesRepository
from .in_memory_attributes_repository import InMemoryAttributesRepository

__all__ = ["DynamoDBAttributesRepository", "InMemoryAttributesRepository"]

from .base import DataSource
from .document_api import DocumentApiDataSource
from .handle import DataSourceHandle
from .memory import InMemoryDataSource

__all__ = [
    "DataSource",
    "DocumentApiDataSource",
    "DataSourceHandle",
    "InMemoryDataSource",
]

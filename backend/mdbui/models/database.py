"""
Read models returned by the database service.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from mdbui.database.documents import encode_document


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def _truncate_doubles(cls, value: Any) -> Any:
        # Server commands report some counters as doubles
        if isinstance(value, float):
            return int(value)
        return value


class DatabaseStats(_CamelModel):
    """
    Subset of the dbStats command output.

    When dbStats fails only ``collections`` is populated.
    """
    collections: int = Field(0, description="Number of collections")
    objects: int = Field(0, description="Number of documents")
    data_size: int = Field(0, alias="dataSize", description="Uncompressed data size in bytes")
    indexes: int = Field(0, description="Number of indexes")
    index_size: int = Field(0, alias="indexSize", description="Total index size in bytes")
    storage_size: int = Field(0, alias="storageSize", description="Allocated storage in bytes")


class DatabaseInfo(BaseModel):
    """A database with its collections and stats snapshot."""
    name: str = Field(..., description="Database name")
    collections: list[str] = Field(default_factory=list, description="Collection names")
    stats: DatabaseStats = Field(..., description="Best-effort stats snapshot")


class DocumentPage(BaseModel):
    """
    One page of documents from a sorted skip/limit query.

    ``total`` comes from a separate count and may disagree with the returned
    rows under concurrent writes.
    """
    documents: list[dict[str, Any]] = Field(default_factory=list, description="Documents on this page")
    total: int = Field(..., ge=0, description="Documents matching the filter")
    page: int = Field(..., ge=1, description="Requested page number")
    limit: int = Field(..., gt=0, description="Requested page size")

    @field_serializer("documents", when_used="json")
    def _serialize_documents(self, documents: list[dict[str, Any]]) -> list[Any]:
        return [encode_document(doc) for doc in documents]


class ConnectionCounters(_CamelModel):
    """serverStatus.connections"""
    current: int = 0
    available: int = 0
    total_created: int = Field(0, alias="totalCreated")


class MemoryCounters(_CamelModel):
    """serverStatus.mem, in megabytes."""
    resident: int = 0
    virtual: int = 0
    mapped: int = 0


class ServerStats(_CamelModel):
    """Server-wide counters plus the number of databases."""
    version: str = Field("", description="Server version")
    uptime: int = Field(0, description="Uptime in seconds")
    connections: ConnectionCounters = Field(default_factory=ConnectionCounters)
    mem: MemoryCounters = Field(default_factory=MemoryCounters)
    database_count: int = Field(0, alias="databaseCount", description="Number of databases")

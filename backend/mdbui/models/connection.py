"""
Connection profile model persisted in the connections file.
"""
from urllib.parse import quote_plus

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_AUTH_DB = "admin"

# Written to the connections file only when non-empty
OPTIONAL_FIELDS = ("username", "password", "authDB", "description")


class ConnectionProfile(BaseModel):
    """
    A named MongoDB connection.

    Field names on the wire and on disk are camelCase (authDB, createdAt,
    updatedAt); timestamps are unix seconds.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field("", description="Unique profile identifier")
    name: str = Field("", description="Display name")
    host: str = Field("localhost", description="MongoDB host")
    port: int = Field(27017, ge=0, le=65535, description="MongoDB port")
    database: str = Field("", description="Default database")
    username: str = Field("", description="Username for authentication")
    password: str = Field("", description="Password for authentication")
    auth_db: str = Field("", alias="authDB", description="Authentication database")
    description: str = Field("", description="Free-form description")
    created_at: int = Field(0, alias="createdAt", description="Creation time (unix seconds)")
    updated_at: int = Field(0, alias="updatedAt", description="Last update time (unix seconds)")

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

    def get_uri(self) -> str:
        """
        Build the MongoDB connection URI for this profile.

        With credentials the auth source is the profile's authDB, else its
        database, else ``admin``.
        """
        if self.has_credentials:
            auth_source = self.auth_db or self.database or DEFAULT_AUTH_DB
            return (
                f"mongodb://{quote_plus(self.username)}:{quote_plus(self.password)}"
                f"@{self.host}:{self.port}/{self.database}?authSource={auth_source}"
            )
        return f"mongodb://{self.host}:{self.port}/{self.database}"

    def to_record(self) -> dict:
        """Serialize for the connections file, omitting empty optional fields."""
        record = self.model_dump(by_alias=True)
        for field in OPTIONAL_FIELDS:
            if not record.get(field):
                record.pop(field, None)
        return record

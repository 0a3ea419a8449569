"""Server profile and probe result models."""

from pydantic import BaseModel
from typing import Optional


class ServerProfile(BaseModel):
    """Connection parameters of a named backend."""

    name: str
    server_name: str
    port_number: Optional[str] = None
    database_name: Optional[str] = None
    user: Optional[str] = None
    password: Optional[str] = None

    @property
    def url(self) -> str:
        """Connection URL, e.g. ``postgresql://user@host:5432/db``."""
        credentials = ""
        if self.user:
            credentials = self.user
            if self.password:
                credentials += f":{self.password}"
            credentials += "@"
        port = f":{self.port_number}" if self.port_number else ""
        database = f"/{self.database_name}" if self.database_name else ""
        return f"{self.name}://{credentials}{self.server_name}{port}{database}"


class ProbeResult(BaseModel):
    """Outcome of a single availability probe."""

    profile: str
    server_name: str
    port: int
    available: bool
    error: Optional[str] = None

"""Domain entity describing an uploaded broker verification document."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class BrokerDocument:
    """Metadata for a file a broker submitted for verification."""

    id: int | None
    broker_email: str
    file_name: str
    file_path: str
    uploaded_at: datetime | None = None


__all__ = ["BrokerDocument"]

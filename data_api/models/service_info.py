"""Service identity model."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ServiceInfo(BaseModel):
    """Process identity, set once at startup."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(serialization_alias="service-name")
    instance_id: str = Field(
        default_factory=lambda: str(uuid4()),
        serialization_alias="service-id",
    )

    @classmethod
    def create(cls, name: str) -> "ServiceInfo":
        """Assign a fresh instance id to the named service.

        Raises:
            ValueError: If the service name is empty
        """
        if not name:
            raise ValueError("Service name not provided.")
        return cls(name=name)

    def standard_log_fields(self, hostname: str) -> dict[str, str]:
        """Fields stamped on every log line of this process."""
        return {"hostname": hostname, "service": self.name, "id": self.instance_id}

"""Service configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._darwin._Data import _Data as _DarwinData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "darwin": _DarwinData,
}


class ServiceConfig(BaseModel):
    """Service configuration with platform-specific data."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field("darwin", description="Platform/service manager type")
    data: BaseModel = Field(default_factory=_DarwinData, description="Platform-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"service config must be a dict, got {type(values).__name__}")
        values = dict(values)
        service_type = values.setdefault("type", "darwin")
        config_data_class = _BACKEND_REGISTRY.get(service_type)
        if not config_data_class:
            raise ValueError(f"Unknown service type: {service_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        if isinstance(data, BaseModel):
            data = data.model_dump()
        values["data"] = config_data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # Explicitly serialize the data field since it's typed as BaseModel
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result

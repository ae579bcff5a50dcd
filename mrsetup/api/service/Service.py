"""Service public API - installs and manages model-runner as a system service."""

from pathlib import Path
from typing import TYPE_CHECKING, Any

from ..StageResult import StageResult
from .ServiceConfig import _BACKEND_REGISTRY, ServiceConfig
from ._AbstractImpl import _AbstractImpl

if TYPE_CHECKING:
    from pydantic import BaseModel


class Service:
    """Public API for service operations."""

    def __init__(self, service_config: ServiceConfig):
        self.service_config = service_config
        self._impl: _AbstractImpl | None = None

    @staticmethod
    def validate_backend_type(
        result_obj: StageResult,
        backend_type: str,
        output_class: type["BaseModel"],
        fields: dict[str, Any],
    ) -> bool:
        """Validate backend type and set error result if invalid.

        Args:
            result_obj: StageResult to update if validation fails
            backend_type: Backend type to validate
            output_class: Output schema class to instantiate
            fields: Command-specific output fields to use for the failure output

        Returns:
            True if valid, False if invalid (and result_obj is already set)
        """
        if backend_type not in _BACKEND_REGISTRY:
            error_msg = f"Unsupported service backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})"
            result_obj.result = f"Error: {error_msg}"
            result_obj.output = output_class(
                errors=[error_msg],
                warnings=[],
                **fields,
            ).model_dump(mode="python")
            result_obj.success = False
            return False
        return True

    def __enter__(self):
        backend_type = self.service_config.type

        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Import implementation class directly from backend _Impl module
        module = __import__(f"mrsetup.api.service._{backend_type}._Impl", fromlist=[""])
        impl_class = module._Impl
        self._impl = impl_class(self.service_config)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def _require_impl(self) -> _AbstractImpl:
        if not self._impl:
            raise RuntimeError("Service not initialized. Use as context manager first.")
        return self._impl

    def get_service_status(self) -> dict[str, Any]:
        """Get service status (installed, loaded, pid, ...)."""
        return self._require_impl().get_service_status()

    def install_service(self, program_path: Path) -> dict[str, Any]:
        """Write the descriptor for ``program_path`` and load it."""
        return self._require_impl().install_service(program_path)

    def uninstall_service(self) -> dict[str, Any]:
        """Unload the service and remove its descriptor."""
        return self._require_impl().uninstall_service()

    def start_service(self) -> dict[str, Any]:
        """Start service via system service manager."""
        return self._require_impl().start_service()

    def stop_service(self) -> dict[str, Any]:
        """Stop service via system service manager."""
        return self._require_impl().stop_service()

    def restart_service(self) -> dict[str, Any]:
        """Restart service via system service manager."""
        return self._require_impl().restart_service()

"""Abstract base class for service implementations (system service installers)."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any


class _AbstractImpl(ABC):
    """Abstract base class for platform-specific service implementations.

    Services run the model-runner binary under the OS service manager.
    """

    @abstractmethod
    def install_service(self, program_path: Path) -> dict[str, Any]:
        """Write the service descriptor and load it.

        Args:
            program_path: Executable the service runs

        Returns:
            Dictionary with installation result (success, label, plist_path, etc.)
        """
        pass

    @abstractmethod
    def uninstall_service(self) -> dict[str, Any]:
        """Unload the service and remove its descriptor.

        Returns:
            Dictionary with uninstallation result
        """
        pass

    @abstractmethod
    def get_service_status(self) -> dict[str, Any]:
        """Get service status.

        Returns:
            Dictionary with service status information (installed, loaded, pid, etc.)
        """
        pass

    @abstractmethod
    def start_service(self) -> dict[str, Any]:
        """Start the service via the system service manager.

        Returns:
            Dictionary with start result
        """
        pass

    @abstractmethod
    def stop_service(self) -> dict[str, Any]:
        """Stop the service via the system service manager.

        Returns:
            Dictionary with stop result
        """
        pass

    def restart_service(self) -> dict[str, Any]:
        """Stop then start the service.

        Returns:
            Dictionary with start result
        """
        stopped = self.stop_service()
        if not stopped["success"]:
            return stopped
        return self.start_service()

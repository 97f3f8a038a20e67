"""Shell environment abstraction used for assistant detection."""

import shutil
from abc import ABC, abstractmethod


class ShellOps(ABC):
    """Abstract interface for looking up executables."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Return the absolute path of an executable on PATH, or None."""
        ...


class RealShellOps(ShellOps):
    """Production implementation using shutil.which."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)

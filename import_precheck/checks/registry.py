"""
Registry of named prechecks.
"""

from typing import Callable, Dict, List

from .base import Check
from ..exceptions import PrecheckError

CheckFactory = Callable[..., Check]


class CheckRegistry:
    """Maps check names to factories, keeping registration order."""

    def __init__(self) -> None:
        self._factories: Dict[str, CheckFactory] = {}

    def register(self, name: str, factory: CheckFactory) -> None:
        """
        Register a check factory under its display name.

        Args:
            name: Display name of the check
            factory: Callable returning a Check, usually the Check class

        Raises:
            PrecheckError: If a check is already registered under name
        """
        if name in self._factories:
            raise PrecheckError(f"Check '{name}' is already registered")
        self._factories[name] = factory

    def get(self, name: str) -> CheckFactory:
        """
        Get the factory registered under name.

        Raises:
            KeyError: If no check is registered under name
        """
        return self._factories[name]

    def names(self) -> List[str]:
        """Return registered check names in registration order."""
        return list(self._factories)

    def create(self, name: str, *args, **kwargs) -> Check:
        """Instantiate the check registered under ``name``."""
        return self.get(name)(*args, **kwargs)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)

"""Port (ABC) for the root document element's class list."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DocumentTargetPort(ABC):
    """The set of class tokens on the root element (``<html>``)."""

    @property
    @abstractmethod
    def markers(self) -> frozenset[str]:
        """All class tokens currently present."""

    @abstractmethod
    def add(self, *tokens: str) -> None:
        """Add *tokens*; tokens already present are left alone."""

    @abstractmethod
    def remove(self, *tokens: str) -> None:
        """Remove *tokens*; absent tokens are ignored."""

    def contains(self, token: str) -> bool:
        return token in self.markers

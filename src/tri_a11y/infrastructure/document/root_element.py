"""Root element — an ordered class list standing in for ``<html class="...">``."""

from __future__ import annotations

from collections.abc import Iterable

from tri_a11y.domain.ports.document_target import DocumentTargetPort


class RootElement(DocumentTargetPort):
    """Class tokens in insertion order, like ``Element.classList``.

    Tokens added by other parts of the page (theme classes, font classes)
    live alongside the accessibility markers and are preserved.
    """

    def __init__(self, initial_classes: Iterable[str] = ()) -> None:
        self._classes: list[str] = []
        self.add(*initial_classes)

    @property
    def markers(self) -> frozenset[str]:
        return frozenset(self._classes)

    def add(self, *tokens: str) -> None:
        for token in tokens:
            if token and token not in self._classes:
                self._classes.append(token)

    def remove(self, *tokens: str) -> None:
        drop = set(tokens)
        self._classes = [c for c in self._classes if c not in drop]

    def class_attribute(self) -> str:
        """Value for the ``class`` attribute, in insertion order."""
        return " ".join(self._classes)

    def __repr__(self) -> str:
        return f"RootElement(class={self.class_attribute()!r})"

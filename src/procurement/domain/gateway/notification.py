"""Abstract façade for the e-mail notification service."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Notifier(ABC):

    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        """Deliver a message; raise InternalError if it could not be sent."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from primeauth.domain.entities import Webhook


class WebhookNotifier(ABC):
    """Abstract outbound webhook delivery - implemented in the adapter layer"""

    @abstractmethod
    def notify(self, webhooks: List[Webhook], payload: Dict[str, Any]) -> None:
        """Schedule delivery of payload to every webhook without waiting for it"""
        pass

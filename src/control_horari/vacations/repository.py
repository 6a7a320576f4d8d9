from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import RequestStatus
from .model import VacationRequest


class VacationRepository(Protocol):
    def create(self, request: VacationRequest) -> None:
        raise NotImplementedError

    def get(self, request_id: str) -> Optional[VacationRequest]:
        raise NotImplementedError

    def list_requests(
        self,
        *,
        status: Optional[RequestStatus] = None,
        user_id: Optional[str] = None,
    ) -> Sequence[VacationRequest]:
        raise NotImplementedError

    def decide(self, *, request_id: str, status: RequestStatus) -> bool:
        """Move a PENDING request to ``status``. False when nothing changed."""

        raise NotImplementedError

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import LeaveDecision, LeaveFilters, LeaveRequest


class LeaveRepository(Protocol):
    def find(self, filters: LeaveFilters) -> Sequence[LeaveRequest]:
        """Filtered page, oldest first, each row joined with its profile."""

        raise NotImplementedError

    def list_all(self) -> Sequence[LeaveRequest]:
        """Every request, newest first. Unbounded: mind large tables."""

        raise NotImplementedError

    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def apply_decision(self, request_id: str, decision: LeaveDecision) -> Optional[LeaveRequest]:
        raise NotImplementedError

"""Coaching data models."""

from .coach import HEAD_COACH_ROLE, Coach, Connection, Role, Row

__all__ = ["HEAD_COACH_ROLE", "Coach", "Connection", "Role", "Row"]

"""
Audit Module

Bounded, sanitised record of calculator invocations.
"""
from .log import AuditLog, AuditLogEntry, AuditSink, sanitize_inputs

__all__ = ["AuditLog", "AuditLogEntry", "AuditSink", "sanitize_inputs"]

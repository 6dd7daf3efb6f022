"""Notification dispatch and the per-event orchestration."""

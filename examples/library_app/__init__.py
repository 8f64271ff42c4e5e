from .demo import AuditTrail, Catalogue, run_demo, stamp_timestamps  # noqa: F401

__all__ = ["AuditTrail", "Catalogue", "run_demo", "stamp_timestamps"]

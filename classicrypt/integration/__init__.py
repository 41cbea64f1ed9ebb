# Integration Module
"""
Service layer that validates raw user input, plus the audit log
that records every operation.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger, service
    for module in (service, event_logger):
        if hasattr(module, name):
            return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    'CipherService',
    'EventType',
    'CipherEvent',
    'EventLogger',
    'create_event_logger',
]

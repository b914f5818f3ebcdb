# Integration Module
"""
Event logging for the compression core.

Events carry sizes and message digests only, never message content.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger
    return getattr(event_logger, name)

__all__ = [
    'EventType',
    'CompressionEvent',
    'EventLogger',
    'get_message_id',
    'create_event_logger',
]

"""
Event Logger Module

Records what the compression core did, for diagnostics and audit.

Features:
- Decode, padding, compression and failure events
- Privacy-preserving message ids (SHA-256 prefix, never the message itself)
- Callbacks for live output (the CLI uses one for --verbose)
- Query and JSON export helpers

Compression outputs are never recorded: in SHE they are used as derived
keys.
"""

import hashlib
import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


# ============================================================================
# Constants
# ============================================================================

EVENT_VERSION = "1.0"
MESSAGE_ID_LENGTH = 16  # hex chars of the SHA-256 digest


def get_message_id(data: bytes) -> str:
    """
    Short identifier for a message.

    Args:
        data: Raw message bytes

    Returns:
        First 16 hex characters of SHA-256(data)
    """
    return hashlib.sha256(data).hexdigest()[:MESSAGE_ID_LENGTH]


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of events the core reports."""

    MESSAGE_DECODED = "message_decoded"
    PADDING_COMPUTED = "padding_computed"
    COMPRESSION_DONE = "compression_done"
    COMPRESSION_FAILED = "compression_failed"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class CompressionEvent:
    """A single logged event."""
    event_type: EventType
    timestamp: int  # Unix timestamp
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Serialize to a compact JSON record."""
        return json.dumps({
            'version': EVENT_VERSION,
            'type': self.event_type.value,
            'time': self.timestamp,
            'iso_time': datetime.fromtimestamp(self.timestamp).isoformat(),
            'details': self.details,
        }, separators=(',', ':'))

    @classmethod
    def from_record(cls, record: str) -> 'CompressionEvent':
        """Parse an event from a JSON record."""
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            timestamp=data['time'],
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        details = " ".join(f"{k}={v}" for k, v in self.details.items())
        return f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] {self.event_type.value} {details}".rstrip()


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    In-process event log.

    Events are kept in memory for the lifetime of the logger. Callbacks
    are invoked synchronously for every new event.
    """

    def __init__(self, max_events: Optional[int] = None):
        """
        Initialize the event logger.

        Args:
            max_events: Keep at most this many events (oldest dropped first)
        """
        self._events: List[CompressionEvent] = []
        self._max_events = max_events
        self._callbacks: List[Callable[[CompressionEvent], None]] = []

    def _add_event(self, event_type: EventType, details: Dict[str, Any]) -> CompressionEvent:
        event = CompressionEvent(
            event_type=event_type,
            timestamp=int(time.time()),
            details=details,
        )
        self._events.append(event)
        if self._max_events is not None and len(self._events) > self._max_events:
            del self._events[:len(self._events) - self._max_events]

        for callback in self._callbacks:
            try:
                callback(event)
            except Exception:
                pass  # a broken callback must not abort a compression

        return event

    def add_callback(self, callback: Callable[[CompressionEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[CompressionEvent], None]) -> None:
        """Remove a callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ========================================================================
    # Core Events
    # ========================================================================

    def log_decoded(self, data: bytes, blocks: int, remainder: int) -> CompressionEvent:
        """
        Log a decoded message.

        Args:
            data: Raw message bytes (only a digest prefix is stored)
            blocks: Number of full blocks
            remainder: Remainder length in bytes
        """
        return self._add_event(EventType.MESSAGE_DECODED, {
            'msg_id': get_message_id(data),
            'blocks': blocks,
            'remainder': remainder,
            'bits': len(data) * 8,
        })

    def log_padding(self, bit_length: int, pad_length: int) -> CompressionEvent:
        """Log a padding computation."""
        return self._add_event(EventType.PADDING_COMPUTED, {
            'bits': bit_length,
            'pad_bytes': pad_length,
        })

    def log_compression(self, data: bytes, blocks: int, padded: bool = True) -> CompressionEvent:
        """
        Log a completed compression.

        Args:
            data: Message bytes fed to the engine (digest prefix only)
            blocks: Number of blocks folded, including padding blocks
            padded: Whether padding was applied by the engine
        """
        return self._add_event(EventType.COMPRESSION_DONE, {
            'msg_id': get_message_id(data),
            'blocks': blocks,
            'padded': padded,
        })

    def log_failure(self, error: Exception, bit_length: Optional[int] = None) -> CompressionEvent:
        """Log a failed operation."""
        details: Dict[str, Any] = {
            'error': type(error).__name__,
            'kind': getattr(error, 'kind', 'error'),
        }
        if bit_length is not None:
            details['bits'] = bit_length
        return self._add_event(EventType.COMPRESSION_FAILED, details)

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get_all_events(self) -> List[CompressionEvent]:
        """Return all retained events, oldest first."""
        return list(self._events)

    def get_events_by_type(self, event_type: EventType) -> List[CompressionEvent]:
        """Get all events of a specific type."""
        return [e for e in self._events if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[CompressionEvent]:
        """Get the most recent events."""
        return self._events[-count:] if count > 0 else []

    def clear(self) -> None:
        """Drop all retained events."""
        self._events.clear()

    def export_log(self) -> str:
        """Export the log as a JSON array of records."""
        return "[" + ",".join(e.to_record() for e in self._events) + "]"

    @classmethod
    def import_log(cls, json_str: str) -> 'EventLogger':
        """Rebuild a logger from export_log() output."""
        logger = cls()
        for item in json.loads(json_str):
            logger._events.append(CompressionEvent.from_record(json.dumps(item)))
        return logger

    def __len__(self) -> int:
        return len(self._events)


# ============================================================================
# Convenience Functions
# ============================================================================

def create_event_logger(max_events: Optional[int] = None) -> EventLogger:
    """Create a new event logger."""
    return EventLogger(max_events=max_events)

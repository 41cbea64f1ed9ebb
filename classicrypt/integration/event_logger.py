"""
Event Logger Module

Keeps a tamper-evident audit log of every cipher operation.

Features:
- One event per encode / decode / brute-force / RSA operation
- Failed operations logged with their error kind
- Inputs are never stored; only a short SHA-256 fingerprint is kept
- Entries are hash-chained, so editing or dropping an entry is detected

Author: ClassiCrypt Project
"""

import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Callable

from cryptography.hazmat.primitives import hashes


# ============================================================================
# Constants
# ============================================================================

LOG_VERSION = "1.0"
DEFAULT_FINGERPRINT_LENGTH = 16
GENESIS_DIGEST = "0" * 64


# ============================================================================
# Hashing
# ============================================================================

def sha256_hex(data: bytes) -> str:
    """Hex SHA-256 digest of data."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize().hex()


def fingerprint(value: Any, length: int = DEFAULT_FINGERPRINT_LENGTH) -> str:
    """
    Short SHA-256 fingerprint of an input value.

    Lets two events be matched to the same input without storing the
    input itself.
    """
    return sha256_hex(str(value).encode())[:length]


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of operations that can be logged."""

    CIPHER_ENCODE = "cipher_encode"
    CIPHER_DECODE = "cipher_decode"
    BRUTE_FORCE = "brute_force"

    RSA_KEYGEN = "rsa_keygen"
    RSA_ENCRYPT = "rsa_encrypt"
    RSA_DECRYPT = "rsa_decrypt"

    OPERATION_FAILED = "operation_failed"
    SYSTEM_START = "system_start"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class CipherEvent:
    """A single logged operation."""
    event_type: EventType
    cipher: str
    timestamp: int  # Unix timestamp
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Serialize to a compact JSON record."""
        return json.dumps({
            'version': LOG_VERSION,
            'type': self.event_type.value,
            'cipher': self.cipher,
            'time': self.timestamp,
            'details': self.details,
        }, separators=(',', ':'), sort_keys=True)

    @classmethod
    def from_record(cls, record: str) -> 'CipherEvent':
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            cipher=data['cipher'],
            timestamp=data['time'],
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        return (
            f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] "
            f"{self.event_type.value} | {self.cipher}"
        )


@dataclass(frozen=True)
class LogEntry:
    """An event record chained to the entry before it."""
    index: int
    prev_digest: str
    record: str
    digest: str

    @staticmethod
    def compute_digest(index: int, prev_digest: str, record: str) -> str:
        return sha256_hex(f"{index}|{prev_digest}|{record}".encode())

    def to_dict(self) -> Dict[str, Any]:
        return {
            'index': self.index,
            'prev_digest': self.prev_digest,
            'record': self.record,
            'digest': self.digest,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'LogEntry':
        return cls(
            index=data['index'],
            prev_digest=data['prev_digest'],
            record=data['record'],
            digest=data['digest'],
        )


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    Hash-chained audit log of cipher operations.

    Example:
        >>> logger = EventLogger()
        >>> event = logger.log_cipher("caesar", encode=True, text="HELLO")
        >>> logger.verify_integrity()
        True
    """

    def __init__(self, entries: Optional[List[LogEntry]] = None, log_start: bool = True):
        """
        Initialize the event logger.

        Args:
            entries: Existing chain to continue (e.g. from import_log)
            log_start: If True, record a SYSTEM_START event
        """
        self._entries: List[LogEntry] = list(entries or [])
        self._callbacks: List[Callable[[CipherEvent], None]] = []

        if log_start:
            self._add_event(CipherEvent(
                event_type=EventType.SYSTEM_START,
                cipher="system",
                timestamp=int(time.time()),
                details={'node': 'classicrypt'},
            ))

    def _add_event(self, event: CipherEvent) -> CipherEvent:
        index = len(self._entries)
        prev = self._entries[-1].digest if self._entries else GENESIS_DIGEST
        record = event.to_record()
        self._entries.append(LogEntry(
            index=index,
            prev_digest=prev,
            record=record,
            digest=LogEntry.compute_digest(index, prev, record),
        ))

        for callback in self._callbacks:
            callback(event)
        return event

    def add_callback(self, callback: Callable[[CipherEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[CipherEvent], None]) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ========================================================================
    # Operation Events
    # ========================================================================

    def log_cipher(
        self,
        cipher: str,
        encode: bool,
        text: str,
        key: Optional[Dict[str, Any]] = None
    ) -> CipherEvent:
        """
        Log an encode or decode.

        Args:
            cipher: Cipher name
            encode: True for encode, False for decode
            text: The input text (only its fingerprint is stored)
            key: Key parameters, if any

        Returns:
            The logged event
        """
        details: Dict[str, Any] = {'input': fingerprint(text), 'length': len(text)}
        if key:
            details['key'] = key
        return self._add_event(CipherEvent(
            event_type=EventType.CIPHER_ENCODE if encode else EventType.CIPHER_DECODE,
            cipher=cipher,
            timestamp=int(time.time()),
            details=details,
        ))

    def log_brute_force(self, cipher: str, text: str, candidates: int) -> CipherEvent:
        """Log a brute-force key search."""
        return self._add_event(CipherEvent(
            event_type=EventType.BRUTE_FORCE,
            cipher=cipher,
            timestamp=int(time.time()),
            details={'input': fingerprint(text), 'candidates': candidates},
        ))

    def log_rsa_keygen(self, n: int, e: int) -> CipherEvent:
        """Log RSA key generation. Only the public part is recorded."""
        return self._add_event(CipherEvent(
            event_type=EventType.RSA_KEYGEN,
            cipher="rsa",
            timestamp=int(time.time()),
            details={'n': n, 'e': e},
        ))

    def log_rsa(self, encrypt: bool, n: int) -> CipherEvent:
        """Log an RSA encryption or decryption."""
        return self._add_event(CipherEvent(
            event_type=EventType.RSA_ENCRYPT if encrypt else EventType.RSA_DECRYPT,
            cipher="rsa",
            timestamp=int(time.time()),
            details={'n': n},
        ))

    def log_failure(self, cipher: str, operation: str, error: str) -> CipherEvent:
        """Log an operation that was rejected."""
        return self._add_event(CipherEvent(
            event_type=EventType.OPERATION_FAILED,
            cipher=cipher,
            timestamp=int(time.time()),
            details={'operation': operation, 'error': error},
        ))

    # ========================================================================
    # Retrieval
    # ========================================================================

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def get_all_events(self) -> List[CipherEvent]:
        return [CipherEvent.from_record(entry.record) for entry in self._entries]

    def get_events_by_type(self, event_type: EventType) -> List[CipherEvent]:
        """Get all events of a specific type."""
        return [e for e in self.get_all_events() if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[CipherEvent]:
        """Get the most recent events."""
        return self.get_all_events()[-count:]

    def format_audit_log(self, last_n: Optional[int] = None) -> str:
        """Render the log in a readable format."""
        events = self.get_all_events()
        if last_n:
            events = events[-last_n:]

        lines = ["=" * 70, "CIPHER AUDIT LOG", "=" * 70]
        for event in events:
            lines.append(str(event))
            for k, v in event.details.items():
                lines.append(f"    {k}: {v}")
        lines.append("=" * 70)
        lines.append(f"Total events: {len(self._entries)}")
        lines.append("=" * 70)
        return "\n".join(lines)

    def verify_integrity(self) -> bool:
        """
        Check the hash chain.

        Returns:
            True if every entry links to its predecessor and its digest
            matches its content
        """
        prev = GENESIS_DIGEST
        for index, entry in enumerate(self._entries):
            if entry.index != index or entry.prev_digest != prev:
                return False
            if entry.digest != LogEntry.compute_digest(index, prev, entry.record):
                return False
            prev = entry.digest
        return True

    def export_log(self) -> str:
        """Export the entire audit log as JSON."""
        return json.dumps([entry.to_dict() for entry in self._entries], indent=2)

    @classmethod
    def import_log(cls, json_str: str) -> 'EventLogger':
        """Import an audit log from JSON."""
        entries = [LogEntry.from_dict(d) for d in json.loads(json_str)]
        return cls(entries=entries, log_start=False)


def create_event_logger() -> EventLogger:
    """Create a new event logger."""
    return EventLogger()

"""
Services Package

Exports all services for easy importing.
"""

from flatsite.services.slugs import sanitize, DEFAULT_SLUG
from flatsite.services.content import (
    ContentStore,
    FileContentStore,
    MemoryContentStore,
    NOT_FOUND_HTML,
    create_store,
    neutralize,
)
from flatsite.services.session_gate import SessionGate, SESSION_FLAG

__all__ = [
    'sanitize',
    'DEFAULT_SLUG',
    'ContentStore',
    'FileContentStore',
    'MemoryContentStore',
    'NOT_FOUND_HTML',
    'create_store',
    'neutralize',
    'SessionGate',
    'SESSION_FLAG',
]

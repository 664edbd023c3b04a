#!/usr/bin/env python3
"""
Utility functions for the web application.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timezone

from fastapi import Request


def safe_datetime_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Safely convert datetime to ISO format string.
    
    Args:
        dt: Datetime object.
    
    Returns:
        ISO format string or None.
    """
    if dt is None:
        return None
    return dt.isoformat()


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Attach UTC to naive datetimes.

    SQLite drops tzinfo on the way back, so stored timestamps may come
    back naive even though they were written in UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def client_metadata(request: Request) -> Dict[str, Any]:
    """Browser and address details recorded alongside saved answers."""
    headers = request.headers
    forwarded = headers.get('x-forwarded-for')
    ip = headers.get('client-ip') or (forwarded.split(',')[0].strip() if forwarded else None)
    if not ip and request.client:
        ip = request.client.host
    return {
        'user_agent': headers.get('user-agent', 'unknown'),
        'ip': ip or 'unknown',
    }

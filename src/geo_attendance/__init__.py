"""Geofenced attendance service.

Organized by feature modules (attendance, geofence, realtime) with thin Flask
and Socket.IO controller layers over service/repository layers.
"""

from .main import create_app

__all__ = ["create_app"]

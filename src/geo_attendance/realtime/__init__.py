"""Realtime infrastructure (Socket.IO).

Holds the employee-to-channel registry, the broadcast primitive and the
socket event handlers that feed location reports into the geofence service.
"""

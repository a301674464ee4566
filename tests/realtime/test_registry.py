from __future__ import annotations

from geo_attendance.realtime.registry import ConnectionRegistry


class RecordingDisconnect:
    def __init__(self):
        self.closed: list[str] = []

    def __call__(self, channel):
        self.closed.append(channel)


def test_register_maps_employee_to_channel():
    registry = ConnectionRegistry(RecordingDisconnect())

    assert registry.register("E1", "sid-1") is None
    assert registry.channel_for("E1") == "sid-1"
    assert "E1" in registry
    assert len(registry) == 1


def test_reregistration_evicts_and_disconnects_previous_channel():
    disconnect = RecordingDisconnect()
    registry = ConnectionRegistry(disconnect)
    registry.register("E1", "sid-1")

    evicted = registry.register("E1", "sid-2")

    assert evicted == "sid-1"
    assert disconnect.closed == ["sid-1"]
    assert registry.channel_for("E1") == "sid-2"
    assert len(registry) == 1


def test_same_channel_registering_twice_is_not_evicted():
    disconnect = RecordingDisconnect()
    registry = ConnectionRegistry(disconnect)
    registry.register("E1", "sid-1")

    assert registry.register("E1", "sid-1") is None
    assert disconnect.closed == []


def test_evicted_channel_disconnect_event_keeps_new_mapping():
    registry = None

    def disconnect(channel):
        # the server fires the disconnect handler synchronously
        registry.unregister_by_channel(channel)

    registry = ConnectionRegistry(disconnect)
    registry.register("E1", "sid-1")
    registry.register("E1", "sid-2")

    assert registry.channel_for("E1") == "sid-2"


def test_unregister_by_channel():
    registry = ConnectionRegistry(RecordingDisconnect())
    registry.register("E1", "sid-1")
    registry.register("E2", "sid-2")

    assert registry.unregister_by_channel("sid-1") == "E1"
    assert registry.channel_for("E1") is None
    assert registry.channel_for("E2") == "sid-2"
    assert registry.unregister_by_channel("sid-unknown") is None
    assert len(registry) == 1


def test_failed_disconnect_still_registers_new_channel():
    def disconnect(channel):
        raise RuntimeError("already gone")

    registry = ConnectionRegistry(disconnect)
    registry.register("E1", "sid-1")

    assert registry.register("E1", "sid-2") == "sid-1"
    assert registry.channel_for("E1") == "sid-2"


def test_channel_registering_under_new_employee_drops_old_mapping():
    disconnect = RecordingDisconnect()
    registry = ConnectionRegistry(disconnect)
    registry.register("E1", "sid-1")

    assert registry.register("E2", "sid-1") is None

    assert "E1" not in registry
    assert registry.channel_for("E2") == "sid-1"
    assert disconnect.closed == []

    assert registry.unregister_by_channel("sid-1") == "E2"
    assert len(registry) == 0

"""Discord Rich Presence for the garage: shows what the player is driving.

Uses pypresence when it is installed and GARAGE_DISCORD_CLIENT_ID holds a
real application id. Otherwise each activity is printed instead of sent;
nothing here raises into the game.
"""
from __future__ import annotations

import os
import threading
import typing

try:
    from pypresence import Presence
except ImportError:
    Presence = None  # type: ignore

PLACEHOLDER_ID = 'REPLACE_WITH_CLIENT_ID'
CLIENT_ID = os.environ.get('GARAGE_DISCORD_CLIENT_ID', PLACEHOLDER_ID)


def activity_for(vehicle) -> typing.Dict[str, str]:
    """Presence payload for a vehicle; None means standing in the garage."""
    if vehicle is None:
        return {'details': "In the garage", 'state': "Picking a vehicle",
                'large_image': 'garage', 'large_text': "Garage"}
    name = getattr(vehicle, 'name', None) or type(vehicle).__name__
    return {'details': "On the road", 'state': f"Driving: {name}",
            'large_image': 'garage', 'large_text': name}


class DrivingPresence:
    """One pypresence connection. All client calls happen under one lock."""

    def __init__(self, client_id: str = CLIENT_ID) -> None:
        self.client_id = client_id
        self.activity: typing.Dict[str, str] = {}
        self._client = None
        self._lock = threading.Lock()

    @property
    def connected(self) -> bool:
        return self._client is not None

    def connect(self) -> bool:
        if self.connected:
            return True
        if Presence is None:
            print("DrivingPresence: pypresence not installed, presence disabled")
            return False
        if not self.client_id or self.client_id == PLACEHOLDER_ID:
            print("DrivingPresence: no client id set, presence disabled")
            return False
        try:
            client = Presence(self.client_id)
            client.connect()
        except Exception as e:
            print("DrivingPresence: failed to connect:", e)
            return False
        with self._lock:
            self._client = client
        print("DrivingPresence: connected")
        self.publish(self.activity or activity_for(None))
        return True

    def close(self) -> None:
        with self._lock:
            client, self._client = self._client, None
            if client is None:
                return
            try:
                client.clear()
            except Exception as e:
                print("DrivingPresence: clear failed:", e)
            try:
                client.close()
            except Exception as e:
                print("DrivingPresence: close failed:", e)

    def publish(self, activity: typing.Dict[str, str]) -> None:
        self.activity = dict(activity)
        with self._lock:
            if self._client is None:
                print("DrivingPresence (offline):", self.activity)
                return
            try:
                self._client.update(**self.activity)
            except Exception as e:
                print("DrivingPresence: update failed:", e)

    def show_vehicle(self, vehicle) -> None:
        self.publish(activity_for(vehicle))

    def show_player(self, player) -> None:
        self.show_vehicle(player.vehicle)


# Module-level singleton used by the playground
_presence = DrivingPresence()


def start() -> bool:
    return _presence.connect()


def shutdown() -> None:
    _presence.close()


def set_menu() -> None:
    _presence.show_vehicle(None)


def show_player(player) -> None:
    _presence.show_player(player)

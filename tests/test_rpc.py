import pytest

import rpc
from garage import Player, Car, Bicycle


class FakePresence:
    instances = []

    def __init__(self, client_id):
        self.client_id = client_id
        self.updates = []
        self.closed = False
        FakePresence.instances.append(self)

    def connect(self):
        pass

    def update(self, **payload):
        if self.closed:
            raise AssertionError("update on a closed client")
        self.updates.append(payload)

    def clear(self):
        pass

    def close(self):
        self.closed = True


class BrokenPresence(FakePresence):
    def connect(self):
        raise ConnectionError("discord not running")


class StuckClearPresence(FakePresence):
    def clear(self):
        raise OSError("pipe closed")


@pytest.fixture
def fake(monkeypatch):
    FakePresence.instances.clear()
    monkeypatch.setattr(rpc, 'Presence', FakePresence)
    return FakePresence


def test_activity_for_vehicle_and_garage():
    assert rpc.activity_for(Car())['state'] == "Driving: Car"
    assert rpc.activity_for(Car())['large_text'] == "Car"
    assert rpc.activity_for(None)['details'] == "In the garage"


def test_placeholder_id_does_not_connect(fake, capsys):
    presence = rpc.DrivingPresence(client_id=rpc.PLACEHOLDER_ID)
    assert presence.connect() is False
    assert not presence.connected
    assert fake.instances == []
    assert "no client id" in capsys.readouterr().out


def test_offline_activity_is_printed(capsys):
    presence = rpc.DrivingPresence(client_id=rpc.PLACEHOLDER_ID)
    presence.show_player(Player(Bicycle()))
    assert capsys.readouterr().out.startswith("DrivingPresence (offline):")
    assert presence.activity['state'] == "Driving: Bicycle"


def test_connect_publishes_and_follows_player(fake):
    presence = rpc.DrivingPresence(client_id='1234')
    assert presence.connect()
    client = fake.instances[-1]
    assert client.client_id == '1234'
    assert client.updates[-1]['details'] == "In the garage"

    player = Player(Car())
    presence.show_player(player)
    player.set_vehicle(Bicycle())
    presence.show_player(player)
    assert [u['state'] for u in client.updates[1:]] == ["Driving: Car", "Driving: Bicycle"]

    presence.close()
    assert client.closed
    assert not presence.connected


def test_connect_twice_keeps_one_client(fake):
    presence = rpc.DrivingPresence(client_id='1234')
    presence.connect()
    presence.connect()
    assert len(fake.instances) == 1
    presence.close()


def test_close_still_closes_when_clear_fails(monkeypatch, capsys):
    monkeypatch.setattr(rpc, 'Presence', StuckClearPresence)
    presence = rpc.DrivingPresence(client_id='1234')
    presence.connect()
    client = presence._client
    presence.close()
    assert client.closed
    assert not presence.connected
    assert "clear failed" in capsys.readouterr().out


def test_no_update_reaches_a_closed_client(fake, capsys):
    presence = rpc.DrivingPresence(client_id='1234')
    presence.connect()
    client = fake.instances[-1]
    presence.close()
    presence.show_vehicle(Car())
    assert client.updates[-1]['details'] == "In the garage"
    assert "(offline)" in capsys.readouterr().out


def test_failed_connect_is_not_fatal(monkeypatch, capsys):
    monkeypatch.setattr(rpc, 'Presence', BrokenPresence)
    presence = rpc.DrivingPresence(client_id='1234')
    assert presence.connect() is False
    assert not presence.connected
    assert "failed to connect" in capsys.readouterr().out
    presence.close()


def test_missing_pypresence(monkeypatch, capsys):
    monkeypatch.setattr(rpc, 'Presence', None)
    presence = rpc.DrivingPresence(client_id='1234')
    assert presence.connect() is False
    assert "pypresence not installed" in capsys.readouterr().out

from vollpfosten.game import service
from vollpfosten.game.models import RoundState
from vollpfosten.state import get_ticker


def test_connect_sends_round_state(sio_client):
    assert sio_client.is_connected()
    received = sio_client.get_received()
    states = [pkt for pkt in received if pkt['name'] == 'round:state']
    assert states
    assert states[0]['args'][0]['phase'] == 'empty'


def test_sync_returns_current_state(sio_client, app_store, rng):
    service.roll_letter(app_store, rng=rng)
    ack = sio_client.emit('round:sync', {}, callback=True)
    assert ack['phase'] == 'letter'
    assert ack['letter'] == app_store.read_round_state().letter


def test_tick_is_broadcast(flask_app, sio_client, app_store):
    app_store.replace_round_state(lambda s: RoundState(letter='R', remaining_seconds=3))
    sio_client.get_received()

    get_ticker(flask_app).tick()

    ticks = [pkt for pkt in sio_client.get_received() if pkt['name'] == 'round:tick']
    assert ticks == [{'name': 'round:tick', 'args': [{'remainingSeconds': 2}], 'namespace': '/'}]


def test_no_broadcast_without_timer(flask_app, sio_client):
    sio_client.get_received()
    get_ticker(flask_app).tick()
    assert not [pkt for pkt in sio_client.get_received() if pkt['name'] == 'round:tick']

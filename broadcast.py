from collections import namedtuple

# `to` is a socket id for point-to-point delivery, None to reach everyone
Message = namedtuple('Message', ['event', 'payload', 'to'])


def broadcast(event, payload=None):
    return Message(event, payload, None)


def send_to(sid, event, payload=None):
    return Message(event, payload, sid)


class SocketIOBroadcaster:
    """Fire-and-forget delivery through a Flask-SocketIO server."""

    def __init__(self, socketio):
        self.socketio = socketio

    def deliver(self, messages):
        for message in messages:
            args = () if message.payload is None else (message.payload,)
            self.socketio.emit(message.event, *args, to=message.to)

"""
Logging helpers.

A program that controls the terminal cannot log to that same terminal,
so log records can be sent over UDP to a listener in another terminal::

    TERMCTL_UDP_LOG=1 python myapp.py     # in one terminal
    termctl --listen                       # in another

"""

import os
import socket
import logging

logger = logging.getLogger("termctl")

PORT = int(os.environ.get("TERMCTL_UDP_PORT", "12014"))


class UDPHandler(logging.Handler):
    udp_address = ("127.0.0.1", PORT)

    def __init__(self):
        super().__init__()
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)

    def emit(self, record):
        msg = self.format(record)
        bb = msg.encode()
        size = 2**10
        while bb:
            bb1 = bb[:size]
            bb = bb[size:]
            self._socket.sendto(bb1, self.udp_address)

    def close(self):
        self._socket.close()
        super().close()


def enable_udp_logging(level=logging.INFO):
    """Send the termctl logs to the UDP listener. Returns the handler."""
    for handler in logger.handlers:
        if isinstance(handler, UDPHandler):
            return handler
    handler = UDPHandler()
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def listen_to_logs():
    """Called from ``termctl --listen``

    This way we can see the logs from another process, so they do not get
    mixed up with what that process draws on its terminal.
    """

    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", PORT))

    while True:
        data, addr = sock.recvfrom(2**20)
        print(data.decode())

import socket

import pytest


@pytest.fixture
def ipv6_loopback():
    if not socket.has_ipv6:
        pytest.skip("no IPv6 support")
    sock = socket.socket(socket.AF_INET6, socket.SOCK_STREAM)
    try:
        sock.bind(("::1", 0))
    except OSError:
        pytest.skip("::1 is not configured")
    finally:
        sock.close()
    return "::1"

import errno
import logging
import socket
import sys

logger = logging.getLogger(__name__)

# Windows reports WSAEADDRINUSE instead of EADDRINUSE
_ADDRESS_IN_USE = {errno.EADDRINUSE, 10048}


def check_port(host: str, port: int) -> bool:
    """
    Check whether we can listen on host:port.

    Returns:
        True if the port is free, False if something is already bound to it.

    Raises:
        OSError: for bind failures other than "address already in use",
            including hosts that do not resolve (socket.gaierror)
    """
    # Pick the address family from the host so IPv6 binds such as "::" work
    family, socktype, proto, _, sockaddr = socket.getaddrinfo(
        host, port, type=socket.SOCK_STREAM, flags=socket.AI_PASSIVE
    )[0]

    sock = socket.socket(family, socktype, proto)
    try:
        # Match uvicorn, which sets SO_REUSEADDR; on Windows it would let us bind a busy port
        if sys.platform != "win32":
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(sockaddr)
    except OSError as e:
        if e.errno in _ADDRESS_IN_USE:
            logger.debug(f"Port {port} on {host} is in use: {e}")
            return False
        raise
    finally:
        sock.close()

    return True

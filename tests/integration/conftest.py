import re
import socket
import logging
import threading
import typing as t
import xml.etree.ElementTree as ET

import paramiko
import pytest

from netconf_rpc import decode_chunks, frame
from netconf_rpc.constants import END_OF_MESSAGE


logger = logging.getLogger(__name__)

USERNAME = "admin"
PASSWORD = "admin"
BASE_11_END = b"\n##\n"


class SSHServer(paramiko.ServerInterface):
    """An SSH server offering the netconf subsystem."""

    def __init__(self):
        self.event = threading.Event()

    def check_channel_request(self, kind: str, _: int) -> int:
        return (
            paramiko.OPEN_SUCCEEDED
            if kind == "session"
            else paramiko.OPEN_FAILED_ADMINISTRATIVELY_PROHIBITED
        )

    def get_allowed_auths(self, username: str) -> str:
        return "password"

    def check_auth_password(self, username: str, password: str) -> int:
        if username == USERNAME and password == PASSWORD:
            return paramiko.AUTH_SUCCESSFUL
        return paramiko.AUTH_FAILED

    def check_channel_subsystem_request(self, _: paramiko.Channel, name: str) -> bool:
        if name == "netconf":
            self.event.set()
            return True
        return False


def read_message(channel: paramiko.Channel, base_version: str) -> bytes:
    """
    Read one framed message from a channel.

    Args:
        channel (paramiko.Channel): The channel to read from.
        base_version (str): '1.0' or '1.1'.

    Returns:
        bytes: The message including its framing, or b"" on end of stream.
    """
    delimiter = END_OF_MESSAGE.encode() if base_version == "1.0" else BASE_11_END
    buffer = bytearray()
    while delimiter not in buffer:
        data = channel.recv(4096)
        if not data:
            return b""
        buffer.extend(data)
    return bytes(buffer)


class ReplyServer:
    """Answers framed rpc requests with canned rpc-reply documents."""

    def __init__(
        self, sock: socket.socket, host_key: paramiko.PKey, base_version: str
    ):
        self.base_version = base_version
        self.requests: t.List[str] = []
        self.responses: t.List[t.Tuple[str, str]] = []
        self._sock = sock
        self._host_key = host_key
        self._thread = threading.Thread(target=self._run, daemon=True)

    def respond_to(self, request_pattern: str, response: str) -> None:
        self.responses.append((request_pattern, response))

    def start(self) -> None:
        self._thread.start()

    def join(self) -> None:
        self._thread.join(10)

    def _run(self) -> None:
        transport = paramiko.Transport(self._sock)
        transport.add_server_key(self._host_key)
        server = SSHServer()
        try:
            transport.start_server(server=server)
            channel = transport.accept(10)
            if channel is None or not server.event.wait(10):
                logger.error("netconf channel was not opened")
                return
            self._serve(channel)
        except (EOFError, paramiko.SSHException) as e:
            logger.debug("reply server stopped: %s", e)
        finally:
            transport.close()

    def _serve(self, channel: paramiko.Channel) -> None:
        while True:
            raw = read_message(channel, self.base_version)
            if not raw:
                return
            if self.base_version == "1.0":
                request = raw.decode()[: -len(END_OF_MESSAGE)]
            else:
                request = decode_chunks(raw)
            self.requests.append(request)

            message_id = ET.fromstring(request).get("message-id", "unknown")
            for pattern, response in self.responses:
                if re.search(pattern, request, flags=re.DOTALL):
                    reply = response.format(message_id=message_id).strip()
                    channel.sendall(frame(reply, base_version=self.base_version))
                    break
            else:
                logger.error("no response defined for request: %s", request)
                return


class Client:
    """The client end of a netconf subsystem channel."""

    def __init__(self, channel: paramiko.Channel, base_version: str):
        self.channel = channel
        self.base_version = base_version

    def send(self, request: bytes) -> None:
        self.channel.sendall(frame(request, base_version=self.base_version))

    def receive(self) -> bytes:
        return read_message(self.channel, self.base_version)


@pytest.fixture(scope="session")
def host_key() -> paramiko.PKey:
    return paramiko.RSAKey.generate(2048)


@pytest.fixture
def base_version() -> str:
    return "1.1"


@pytest.fixture
def netconf_pair(host_key, base_version):
    """Yield a reply server and a client connected over the netconf subsystem."""
    client_sock, server_sock = socket.socketpair()
    server = ReplyServer(server_sock, host_key, base_version)
    server.start()

    transport = paramiko.Transport(client_sock)
    transport.connect(username=USERNAME, password=PASSWORD)
    channel = transport.open_session()
    channel.invoke_subsystem("netconf")

    yield server, Client(channel, base_version)

    # server stops reading on EOF and closes its side first
    channel.shutdown_write()
    server.join()
    channel.close()
    transport.close()
    server_sock.close()
    client_sock.close()

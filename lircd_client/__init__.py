''' Client for the lircd control socket: list remotes and keys, send keys
and receive the key presses decoded by lircd.
'''

from .client import LircClient
from .commands import (Command, ListKeysCommand, ListRemotesCommand,
                       SendCommand, StartRepeatCommand, StopRepeatCommand,
                       VersionCommand)
from .config import ClientConfig, get_default_socket_path
from .connection import LineConnection
from .dispatcher import ReplyDispatcher
from .exceptions import (BadPacketException, BootstrapError, ConfigError,
                         LircdConnectionError, LircError, TimeoutException,
                         TruncatedReplyError)
from .parser import ReplyParser
from .remote import Remote
from .reply import KeyEvent, Reply, Status

''' Values read from lircd: command replies and key events. '''

import collections
import enum

from .exceptions import BadPacketException


class Status(enum.Enum):
    ''' The status line of a reply, NONE if the reply has none. '''
    NONE = 0
    SUCCESS = 1
    ERROR = 2


_Reply = collections.namedtuple('_Reply', 'command status data')


class Reply(_Reply):
    ''' The reply lircd sends for a command.

    command: the command string echoed by lircd.
    status:  a Status.
    data:    tuple of data lines, or None if the reply had no DATA section.
    '''

    __slots__ = ()

    def __new__(cls, command, status=Status.NONE, data=None):
        if data is not None:
            data = tuple(data)
        return super().__new__(cls, command, status, data)

    @property
    def success(self):
        ''' True if lircd reported SUCCESS. '''
        return self.status == Status.SUCCESS

    @property
    def sighup(self):
        ''' True for the out-of-band reply lircd sends on SIGHUP. '''
        return self.command == 'SIGHUP'


_KeyEvent = collections.namedtuple('_KeyEvent', 'code repeat key remote')


class KeyEvent(_KeyEvent):
    ''' A key press decoded by lircd: <code> <repeat> <key> <remote>. '''

    __slots__ = ()

    @classmethod
    def parse(cls, line):
        ''' Split an event line into a KeyEvent. '''
        words = line.split()
        if len(words) != 4:
            raise BadPacketException('Bad key event: "%s"' % line)
        return cls(*words)

    @property
    def repeat_count(self):
        ''' The repeat field as an int (it is sent in hex). '''
        return int(self.repeat, 16)


# vim: set expandtab ts=4 sw=4:

''' Commands understood by lircd.

Each command formats its command string and runs it through a
ReplyDispatcher, e.g.

    reply = ListKeysCommand(dispatcher, 'mceusb').run()
    if reply and reply.success:
        print(reply.data)
'''


class Command(object):
    ''' A command string sent to lircd. run() returns its Reply, or None
    if the stream ended before the reply arrived.
    '''

    def __init__(self, dispatcher, cmd_string):
        self.dispatcher = dispatcher
        self.cmd_string = cmd_string

    def run(self):
        ''' Send command and wait for the matching Reply. '''
        return self.dispatcher.query(self.cmd_string)

    def execute(self):
        ''' Send command, return True if lircd reports SUCCESS. '''
        return self.dispatcher.send_command(self.cmd_string)


class VersionCommand(Command):
    ''' Get lircd version. '''

    def __init__(self, dispatcher):
        super().__init__(dispatcher, 'VERSION')


class ListRemotesCommand(Command):
    ''' List available remotes. '''

    def __init__(self, dispatcher):
        super().__init__(dispatcher, 'LIST')


class ListKeysCommand(Command):
    ''' List keys in a remote, as "<code> <key>" data lines. '''

    def __init__(self, dispatcher, remote):
        super().__init__(dispatcher, 'LIST %s' % remote)


class SendCommand(Command):
    ''' Send a key once, optionally repeated count times. '''

    def __init__(self, dispatcher, remote, key, count=0):
        cmd = 'SEND_ONCE %s %s' % (remote, key)
        if count > 0:
            cmd += ' %d' % count
        super().__init__(dispatcher, cmd)


class StartRepeatCommand(Command):
    ''' Start sending a key repeatedly until stopped. '''

    def __init__(self, dispatcher, remote, key):
        super().__init__(dispatcher, 'SEND_START %s %s' % (remote, key))


class StopRepeatCommand(Command):
    ''' Stop a repeat started by StartRepeatCommand. '''

    def __init__(self, dispatcher, remote, key):
        super().__init__(dispatcher, 'SEND_STOP %s %s' % (remote, key))


# vim: set expandtab ts=4 sw=4:

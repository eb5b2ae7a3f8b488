''' lirctool: query lircd and send or receive keys from the command line.

    lirctool version
    lirctool list-remotes
    lirctool list-keys <remote>
    lirctool send-once <remote> <key> [--count n]
    lirctool hold <remote> <key> --seconds s
    lirctool irw

The socket is --socket, else LIRC_SOCKET_PATH, else the output option in
lirc_options.conf. Set LIRC_DEBUG or use --debug for protocol traces.
'''

import argparse
import logging
import os
import sys
import time

from .client import LircClient
from .config import ClientConfig, get_default_socket_path
from .exceptions import LircError

_DEBUG = 'LIRC_DEBUG' in os.environ


def _parse_options(argv):
    ''' Parse command line options into a Namespace. '''
    parser = argparse.ArgumentParser(
        prog='lirctool', description='Talk to the lircd daemon.')
    parser.add_argument('--socket', help='lircd socket path')
    parser.add_argument('--config', help='YAML client configuration file')
    parser.add_argument('--timeout', type=float,
                        help='read timeout in seconds')
    parser.add_argument('--debug', action='store_true', default=_DEBUG,
                        help='log protocol traffic')
    sub = parser.add_subparsers(dest='command', metavar='command')
    sub.required = True

    sub.add_parser('version', help='print lircd version')
    sub.add_parser('list-remotes', help='list configured remotes')
    p = sub.add_parser('list-keys', help='list keys in a remote')
    p.add_argument('remote')
    p = sub.add_parser('send-once', help='send a key')
    p.add_argument('remote')
    p.add_argument('key')
    p.add_argument('--count', type=int, default=0,
                   help='number of repeats')
    p = sub.add_parser('hold', help='send a key repeatedly for a while')
    p.add_argument('remote')
    p.add_argument('key')
    p.add_argument('--seconds', type=float, required=True)
    sub.add_parser('irw', help='print received key events')
    return parser.parse_args(argv)


def _make_config(options):
    ''' Build the ClientConfig from file and command line options. '''
    if options.config:
        config = ClientConfig.load(options.config)
    else:
        config = ClientConfig(get_default_socket_path())
    overrides = {}
    if options.socket:
        overrides['socket_path'] = options.socket
    if options.timeout is not None:
        overrides['timeout'] = options.timeout
    if overrides:
        config = ClientConfig(**dict(config._asdict(), **overrides))
    return config


def _print_key(event):
    print('%s %s %s %s' % event)
    sys.stdout.flush()
    return True


def _run(client, options):
    ''' Run the command, return True on success. '''
    if options.command == 'version':
        print(client.version)
        return True
    if options.command == 'list-remotes':
        for remote in client.remotes.values():
            print(remote.wire_name)
        return True
    if options.command != 'irw' and not client.set_remote(options.remote):
        sys.stderr.write('Unknown remote: %s\n' % options.remote)
        return False
    if options.command == 'list-keys':
        for key in sorted(client.remote.keys):
            print(client.remote.wire_key(key))
        return True
    if options.command == 'send-once':
        return client.send_key(options.key, options.count)
    if options.command == 'hold':
        if not client.send_key_start(options.key):
            return False
        try:
            time.sleep(options.seconds)
        finally:
            stopped = client.send_key_stop()
        return stopped
    while client.wait_for_key(_print_key):
        pass
    return True


def main(argv=None):
    ''' Entry point for the lirctool console script. '''
    options = _parse_options(argv)
    logging.basicConfig(
        level=logging.DEBUG if options.debug else logging.WARNING,
        format='%(name)s: %(levelname)s: %(message)s')
    try:
        config = _make_config(options)
        with LircClient(config=config) as client:
            ok = _run(client, options)
    except LircError as ex:
        sys.stderr.write('lirctool: %s\n' % ex)
        return 1
    except KeyboardInterrupt:
        return 1
    return 0 if ok else 1


if __name__ == '__main__':
    sys.exit(main())


# vim: set expandtab ts=4 sw=4:

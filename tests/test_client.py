''' Test LircClient against a fake lircd socket. '''

import os.path
import tempfile
import threading
import unittest

from lircd_client import (BootstrapError, ClientConfig, KeyEvent, LircClient,
                          LircdConnectionError, Reply, TimeoutException)

from dummy_server import FakeLircd, bootstrap, frame

_TWO_REMOTES = [('VCR', ['PLAY', 'Stop']), ('tv', ['POWER', 'VOLUP'])]


class BootstrapTests(unittest.TestCase):
    ''' Connecting, version and remotes. '''

    def testCatalog(self):
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertEqual(client.version, '0.9.4')
                self.assertEqual(list(client.remotes), ['TV'])
                self.assertEqual(client.remote.name, 'TV')
                self.assertEqual(client.remote.keys,
                                 frozenset(['POWER', 'VOLUP']))
                self.assertTrue(client.set_remote('tv'))
            server.stop()
        self.assertEqual(server.lines, ['VERSION', 'LIST', 'LIST TV'])

    def testFirstRemoteIsDefault(self):
        with FakeLircd(bootstrap(remotes=_TWO_REMOTES)) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertEqual(list(client.remotes), ['VCR', 'TV'])
                self.assertEqual(client.remote.name, 'VCR')
                self.assertTrue(client.remote.supports_key('stop'))

    def testSelectRemote(self):
        with FakeLircd(bootstrap(remotes=_TWO_REMOTES)) as server:
            with LircClient('Tv', socket_path=server.path) as client:
                self.assertEqual(client.remote.name, 'TV')
                self.assertEqual(client.remote.wire_name, 'tv')

    def testRemoteFromConfig(self):
        with FakeLircd(bootstrap(remotes=_TWO_REMOTES)) as server:
            config = ClientConfig(server.path, remote='tv')
            with LircClient(config=config) as client:
                self.assertEqual(client.remote.name, 'TV')

    def testRemotesDifferingInCase(self):
        ''' The first of two remotes with the same upper case name wins. '''
        remotes = [('TV', ['POWER']), ('tv', ['VOLUP'])]
        with FakeLircd(bootstrap(remotes=remotes)) as server:
            with self.assertLogs('lircd_client.client', 'WARNING'):
                client = LircClient(socket_path=server.path)
            with client:
                self.assertEqual(list(client.remotes), ['TV'])
                self.assertEqual(client.remote.wire_name, 'TV')
                self.assertEqual(client.remote.keys, frozenset(['POWER']))

    def testCatalogIsReadOnly(self):
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                with self.assertRaises(TypeError):
                    client.remotes['VCR'] = client.remote

    def testUnknownRemote(self):
        with FakeLircd(bootstrap()) as server:
            with self.assertRaises(BootstrapError):
                LircClient('vcr', socket_path=server.path)
            server.stop()
        self.assertEqual(server.lines, ['VERSION', 'LIST', 'LIST TV'])

    def testNoRemotes(self):
        with FakeLircd(bootstrap(remotes=[])) as server:
            self.assertRaises(BootstrapError, LircClient,
                              socket_path=server.path)

    def testVersionError(self):
        with FakeLircd(frame('VERSION', 'ERROR')) as server:
            self.assertRaises(BootstrapError, LircClient,
                              socket_path=server.path)

    def testListError(self):
        script = frame('VERSION', 'SUCCESS', ['0.9.4']) + frame('LIST', 'ERROR')
        with FakeLircd(script) as server:
            self.assertRaises(BootstrapError, LircClient,
                              socket_path=server.path)

    def testTruncatedCatalog(self):
        script = frame('VERSION', 'SUCCESS', ['0.9.4']) \
            + 'BEGIN\nLIST\nSUCCESS\nDATA\n2\nTV\n'
        with FakeLircd(script) as server:
            self.assertRaises(BootstrapError, LircClient,
                              socket_path=server.path)

    def testSighupDuringBootstrap(self):
        script = frame('SIGHUP') + bootstrap()
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertEqual(client.version, '0.9.4')

    def testNoSocket(self):
        path = os.path.join(tempfile.gettempdir(), 'no-such-lircd.socket')
        self.assertRaises(LircdConnectionError, LircClient, socket_path=path)


class SendTests(unittest.TestCase):
    ''' SEND_ONCE, SEND_START and SEND_STOP. '''

    def testSendKey(self):
        script = bootstrap() + frame('SEND_ONCE TV POWER', 'SUCCESS')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.send_key('power'))
            server.stop()
        self.assertEqual(server.lines[-1], 'SEND_ONCE TV POWER')

    def testSendKeyCount(self):
        script = bootstrap() + frame('SEND_ONCE TV VOLUP 3', 'SUCCESS')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.send_key('VOLUP', 3))

    def testSendKeyError(self):
        script = bootstrap() + frame('SEND_ONCE TV POWER', 'ERROR',
                                     ['hardware does not support sending'])
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.send_key('POWER'))

    def testSendKeyUsesLircdSpelling(self):
        script = bootstrap(remotes=_TWO_REMOTES) \
            + frame('SEND_ONCE VCR Stop', 'SUCCESS')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.send_key('STOP'))

    def testUnsupportedKeyNotSent(self):
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.send_key('MUTE'))
                self.assertFalse(client.send_key_start('MUTE'))
                self.assertIsNone(client.sending_key)
            server.stop()
        self.assertEqual(server.lines, ['VERSION', 'LIST', 'LIST TV'])

    def testKeyCheckedAgainstSelectedRemote(self):
        with FakeLircd(bootstrap(remotes=_TWO_REMOTES)) as server:
            with LircClient('vcr', socket_path=server.path) as client:
                self.assertFalse(client.send_key('POWER'))

    def testSetUnknownRemoteKeepsSelection(self):
        with FakeLircd(bootstrap(remotes=_TWO_REMOTES)) as server:
            with LircClient('tv', socket_path=server.path) as client:
                self.assertFalse(client.set_remote('dvd'))
                self.assertEqual(client.remote.name, 'TV')

    def testBadNames(self):
        ''' Names which are not strings are failures, not errors. '''
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.set_remote(None))
                self.assertEqual(client.remote.name, 'TV')
                self.assertFalse(client.send_key(None))
                self.assertFalse(client.send_key_start(None))

    def testStartStop(self):
        script = bootstrap() + frame('SEND_START TV VOLUP', 'SUCCESS') \
            + frame('SIGHUP') + frame('SEND_STOP TV VOLUP', 'SUCCESS')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.send_key_start('volup'))
                self.assertEqual(client.sending_key, 'VOLUP')
                self.assertTrue(client.send_key_stop())
                self.assertIsNone(client.sending_key)
                self.assertFalse(client.send_key_stop())
            server.stop()
        self.assertEqual(server.lines[-2:],
                         ['SEND_START TV VOLUP', 'SEND_STOP TV VOLUP'])

    def testStopUsesStartRemote(self):
        ''' Changing remote while a key is held stops it where it started. '''
        script = bootstrap(remotes=_TWO_REMOTES) \
            + frame('SEND_START VCR PLAY', 'SUCCESS') \
            + frame('SEND_STOP VCR PLAY', 'SUCCESS')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.send_key_start('PLAY'))
                self.assertTrue(client.set_remote('TV'))
                self.assertFalse(client.send_key_start('POWER'))
                self.assertTrue(client.send_key_stop())

    def testStartFailed(self):
        script = bootstrap() + frame('SEND_START TV POWER', 'ERROR')
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.send_key_start('POWER'))
                self.assertFalse(client.send_key_stop())

    def testStopWithoutStart(self):
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.send_key_stop())

    def testStreamEndsBeforeReply(self):
        with FakeLircd(bootstrap()) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertFalse(client.send_key('POWER'))

    def testClosed(self):
        with FakeLircd(bootstrap()) as server:
            client = LircClient(socket_path=server.path)
            client.close()
            client.close()
            self.assertTrue(client.closed)
            self.assertFalse(client.set_remote('TV'))
            self.assertFalse(client.send_key('POWER'))
            self.assertFalse(client.send_key_start('POWER'))
            self.assertFalse(client.wait_for_key(print))
            self.assertIsNone(client.next_event())


class ReceiveTests(unittest.TestCase):
    ''' Key events and replies on the same socket. '''

    def testWaitForKey(self):
        script = bootstrap() + '0000000000000000 00 POWER TV\n'
        events = []

        def on_key(event):
            events.append(event)
            return True

        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                self.assertTrue(client.wait_for_key(on_key))
                self.assertFalse(client.wait_for_key(on_key))
        self.assertEqual(events, [KeyEvent(code='0000000000000000',
                                           repeat='00', key='POWER',
                                           remote='TV')])

    def testNextEvent(self):
        script = bootstrap() + frame('SIGHUP') \
            + '000000037ff07bef 01 KEY_1 mceusb\n'
        with FakeLircd(script) as server:
            with LircClient(socket_path=server.path) as client:
                reply = client.next_event()
                event = client.next_event()
                self.assertIsNone(client.next_event())
        self.assertIsInstance(reply, Reply)
        self.assertTrue(reply.sighup)
        self.assertEqual(event.key, 'KEY_1')
        self.assertEqual(event.repeat_count, 1)

    def testCloseWakesPendingRead(self):
        ''' close() from another thread ends a blocked read. '''
        results = []
        with FakeLircd(bootstrap(), hold_open=True) as server:
            client = LircClient(socket_path=server.path)
            reader = threading.Thread(
                target=lambda: results.append(client.next_event()))
            reader.start()
            reader.join(0.2)
            client.close()
            reader.join(5)
            self.assertFalse(reader.is_alive())
        self.assertEqual(results, [None])

    def testTimeout(self):
        with FakeLircd(bootstrap(), hold_open=True) as server:
            config = ClientConfig(server.path, timeout=0.2)
            with LircClient(config=config) as client:
                self.assertRaises(TimeoutException, client.next_event)


if __name__ == '__main__':
    unittest.main()

#===========================================================================
#
# PowerLinc modem serial driver
#
#===========================================================================
import time
import serial
from ..Address import Address
from ..LinkDb import LinkRecord
from ..errors import InvalidArgumentError, TransportError
from .. import log
from .. import util
from . import frames
from .Command import Command
from .Driver import Driver, Handle

LOG = log.get_logger()


class Session:
    """Open PLM serial session.

    Holds the pyserial client and the bytes that have been read but not
    yet parsed into frames.
    """
    def __init__(self, port, client):
        """Constructor

        Args:
          port (str):  The serial device or URL that was opened.
          client:  The open pyserial client.
        """
        self.port = port
        self.client = client
        self.buf = bytearray()


#===========================================================================
class Plm(Driver):
    """PowerLinc modem (PLM) driver.

    This talks to a 2413U/2413S style modem with pyserial.  All the calls
    are blocking: a frame is written and then the input stream is read
    until the expected reply arrives or the timeout expires.  Frames that
    arrive while waiting that aren't the expected reply are logged and
    dropped.
    """
    # Ramp commands put the on level in the upper nibble of cmd2 and the ramp
    # rate in the lower nibble.
    DEFAULT_RAMP_RATE = 0x0d

    #-----------------------------------------------------------------------
    def __init__(self, baudrate=19200, timeout=5.0,
                 ramp_rate=DEFAULT_RAMP_RATE, read_dt=0.1):
        """Constructor

        Raises:
          InvalidArgumentError if the ramp rate isn't an integer in [0, 15].

        Args:
          baudrate (int):  Baud rate to use in the connection.
          timeout (float):  Time in seconds to wait for each reply.
          ramp_rate (int):  Ramp rate nibble [0, 15] used by the ramp
                    commands.  Larger numbers are faster ramps.
          read_dt (float):  Serial read timeout in seconds.  This is how
                  often the reply timeout is checked.
        """
        if (not isinstance(ramp_rate, int) or isinstance(ramp_rate, bool) or
                not 0 <= ramp_rate <= 0x0f):
            raise InvalidArgumentError("Invalid ramp rate %r.  The ramp rate "
                                       "must be an integer in the range "
                                       "[0, 15]" % (ramp_rate,))

        self.baudrate = baudrate
        self.timeout = timeout
        self.ramp_rate = ramp_rate
        self.read_dt = read_dt

    #-----------------------------------------------------------------------
    def open(self, port):
        """Open the serial port.

        Args:
          port (str):  The serial device or URL to connect to.  See the
               serial.serial_for_url() documentation for details.

        Returns:
          Session:  Returns the open session.
        """
        LOG.info("Opening modem serial port %s", port)
        try:
            client = serial.serial_for_url(port, do_not_open=True)
            client.baudrate = self.baudrate
            client.parity = serial.PARITY_NONE
            client.timeout = self.read_dt
            client.open()
        except (serial.SerialException, ValueError) as e:
            raise TransportError(str(e)) from e

        return Session(port, client)

    #-----------------------------------------------------------------------
    def close(self, session):
        """Close the serial port.

        Args:
          session (Session):  The session returned by open().
        """
        LOG.info("Closing modem serial port %s", session.port)
        session.buf.clear()
        try:
            session.client.close()
        except serial.SerialException as e:
            raise TransportError(str(e)) from e

    #-----------------------------------------------------------------------
    def read_link_db(self, session):
        """Read the modem all link database.

        The first record is requested and then each next record until the
        modem NAK's the request which means there are no more records.  The
        database has one record per link so the same device can show up many
        times.  Only the first record for each device is returned.

        Args:
          session (Session):  The session returned by open().

        Returns:
          [LinkRecord]:  Returns the database records in modem order.
        """
        LOG.info("Modem %s reading all link database", session.port)

        records = []
        seen = set()

        out = frames.get_record(first=True)
        while True:
            self._write(session, out)
            echo = self._wait(session,
                              lambda f, out=out: frames.is_echo(f, out),
                              "database request reply")
            if not echo.is_ack:
                break

            rec = self._wait(session,
                             lambda f: isinstance(f, frames.LinkRecord),
                             "all link record")
            LOG.debug("Modem %s record %s grp: %s in use: %s ctrl: %s",
                      session.port, rec.addr, rec.group, rec.in_use,
                      rec.is_controller)
            if rec.in_use and rec.addr not in seen:
                seen.add(rec.addr)
                records.append(LinkRecord(str(rec.addr), rec.group,
                                          rec.is_controller))

            out = frames.get_record(first=False)

        LOG.info("Modem %s all link database has %d devices", session.port,
                 len(records))
        return records

    #-----------------------------------------------------------------------
    def connect(self, session, device_id):
        """Connect to a device.

        This sends an ID request to the device.  The device ACK's the
        request and then sends a SET button broadcast that has the device
        category, sub-category, and firmware in the to address field.

        Args:
          session (Session):  The session returned by open().
          device_id (str):  The device address to connect to.

        Returns:
          Handle:  Returns the connected device information.
        """
        addr = self._address(device_id)
        LOG.info("Device %s sending id request", addr)
        self._send_direct(session, addr, 0x10, 0x00)

        def is_id_reply(f):
            return (isinstance(f, frames.Standard) and f.from_addr == addr and
                    f.type == frames.MsgType.BROADCAST and
                    f.cmd1 in (0x01, 0x02))

        reply = self._wait(session, is_id_reply, "id response")
        dev_cat, sub_cat, firmware = reply.to_addr.ids
        handle = Handle(device_id, dev_cat, sub_cat, firmware)
        LOG.info("Device %s connected: %s firmware: %#04x", addr, handle,
                 firmware)
        return handle

    #-----------------------------------------------------------------------
    def send(self, session, handle, command):
        """Send a command to a connected device.

        Args:
          session (Session):  The session returned by open().
          handle (Handle):  The handle returned by connect().
          command (Command):  The command to send.
        """
        addr = self._address(handle.device_id)
        cmd1, cmd2 = self.encode(command)
        LOG.info("Device %s sending %r", addr, command)
        self._send_direct(session, addr, cmd1, cmd2)

    #-----------------------------------------------------------------------
    def encode(self, command):
        """Convert a command to the Insteon cmd1 and cmd2 bytes.

        Args:
          command (Command):  The command to convert.

        Returns:
          (int, int):  Returns the cmd1 and cmd2 bytes.
        """
        if command.type is Command.Type.TURN_ON:
            return 0x11, 0xff
        elif command.type is Command.Type.TURN_OFF:
            return 0x13, 0x00
        elif command.type is Command.Type.RAMP_ON:
            # The on level is only 4 bits in the ramp commands.  Keep the
            # lowest levels from rounding to off.
            level = max(command.level >> 4, 0x01)
            return 0x2e, (level << 4) | self.ramp_rate
        else:
            return 0x2f, self.ramp_rate

    #-----------------------------------------------------------------------
    def _address(self, device_id):
        try:
            return Address(device_id)
        except InvalidArgumentError as e:
            raise TransportError(str(e)) from e

    #-----------------------------------------------------------------------
    def _send_direct(self, session, addr, cmd1, cmd2):
        """Send a direct message and wait for the device ACK.

        Args:
          session (Session):  The session to use.
          addr (Address):  The device to send to.
          cmd1 (int):  The command byte.
          cmd2 (int):  The command argument byte.

        Returns:
          frames.Standard:  Returns the device ACK.
        """
        out = frames.send_standard(addr, cmd1, cmd2)
        self._write(session, out)

        echo = self._wait(session, lambda f: frames.is_echo(f, out),
                          "modem echo")
        if not echo.is_ack:
            raise TransportError("Modem NAK of message %s" % util.to_hex(out))

        def is_reply(f):
            return (isinstance(f, frames.Standard) and f.from_addr == addr and
                    f.type in (frames.MsgType.DIRECT_ACK,
                               frames.MsgType.DIRECT_NAK))

        reply = self._wait(session, is_reply, "device ACK")
        if reply.type == frames.MsgType.DIRECT_NAK:
            raise TransportError("Device %s NAK of command %#04x: %#04x" %
                                 (addr, cmd1, reply.cmd2))

        return reply

    #-----------------------------------------------------------------------
    def _write(self, session, out):
        LOG.debug("Write to modem: %s", util.to_hex(out))
        try:
            session.client.write(out)
        except serial.SerialException as e:
            raise TransportError(str(e)) from e

    #-----------------------------------------------------------------------
    def _wait(self, session, match, what):
        """Read frames until one matches.

        Args:
          session (Session):  The session to use.
          match:  Function match(frame) that returns True for the frame to
                  return.
          what (str):  Description of the frame for the timeout error.

        Returns:
          Returns the matching frame.
        """
        end_time = time.monotonic() + self.timeout
        while True:
            frame = self._read(session, end_time)
            if frame is None:
                raise TransportError("Timeout waiting for %s" % what)

            if match(frame):
                return frame

            LOG.debug("Ignoring unexpected frame: %s", frame)

    #-----------------------------------------------------------------------
    def _read(self, session, end_time):
        """Read the next decoded frame from the modem.

        Args:
          session (Session):  The session to use.
          end_time (float):  Monotonic time to give up at.

        Returns:
          Returns the next frame or None if the time ran out.
        """
        while True:
            frame = frames.pop(session.buf)
            if frame is not None:
                return frame

            if time.monotonic() >= end_time:
                return None

            try:
                data = session.client.read(session.client.in_waiting or 1)
            except serial.SerialException as e:
                raise TransportError(str(e)) from e

            if data:
                LOG.debug("Read from modem: %s", util.to_hex(data))
                session.buf.extend(data)

    #-----------------------------------------------------------------------

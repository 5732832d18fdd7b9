#===========================================================================
#
# PLM serial frame encoding and decoding
#
#===========================================================================
import collections
import enum
from ..Address import Address

__doc__ = """PowerLinc modem serial frames.

Every frame starts with START and a one byte code.  The modem repeats each
host command back (the echo) with an ACK or NAK byte added to the end.  Only
the frames the Plm driver waits on are decoded:

- 0x50  standard message received from a device (Standard)
- 0x57  all link database record (LinkRecord)
- 0x62  echo of a standard message sent to a device (Echo)
- 0x69  echo of the get first database record request (Echo)
- 0x6a  echo of the get next database record request (Echo)

Any other frame code in the SIZES table is read and dropped.
"""

START = 0x02
ACK = 0x06
NAK = 0x15

STD_RECEIVED = 0x50
LINK_RECORD = 0x57
SEND_STD = 0x62
GET_FIRST = 0x69
GET_NEXT = 0x6a

# Frame size in bytes, counting START, the code, and the echo ACK/NAK byte.
SIZES = {
    0x50 : 11,
    0x51 : 25,
    0x52 : 4,
    0x53 : 10,
    0x54 : 3,
    0x55 : 2,
    0x56 : 7,
    0x57 : 10,
    0x58 : 3,
    0x5c : 11,
    0x60 : 9,
    0x61 : 6,
    0x62 : 9,
    0x63 : 5,
    0x64 : 5,
    0x65 : 3,
    0x67 : 3,
    0x69 : 3,
    0x6a : 3,
    0x6b : 4,
    0x6f : 12,
    0x73 : 6,
    }

# An 0x62 echo with the extended bit set in its flags byte carries 14 data
# bytes.
SEND_EXT_SIZE = 23
EXT_BIT = 0x10

# Flags byte for a direct, standard length message with 3 hops.
DIRECT_FLAGS = 0x0f


class MsgType(enum.IntEnum):
    """Standard message type.  This is the top 3 bits of the flags byte.
    """
    DIRECT = 0b000
    DIRECT_ACK = 0b001
    ALL_LINK_CLEANUP = 0b010
    CLEANUP_ACK = 0b011
    BROADCAST = 0b100
    DIRECT_NAK = 0b101
    ALL_LINK_BROADCAST = 0b110
    CLEANUP_NAK = 0b111


# Echo of a host command.  data is the command bytes after the code and
# is_ack is False if the modem rejected the command.
Echo = collections.namedtuple('Echo', ['code', 'data', 'is_ack'])

# Message from a device.  For the SET button broadcast, to_addr holds the
# device category, sub-category and firmware bytes.
Standard = collections.namedtuple(
    'Standard', ['from_addr', 'to_addr', 'type', 'cmd1', 'cmd2'])

# One modem all link database entry.
LinkRecord = collections.namedtuple(
    'LinkRecord', ['addr', 'group', 'in_use', 'is_controller'])


#===========================================================================
def send_standard(addr, cmd1, cmd2):
    """Build a direct standard message frame.

    Args:
      addr (Address):  The device to send to.
      cmd1 (int):  The command byte.
      cmd2 (int):  The command argument byte.

    Returns:
      bytes:  Returns the frame to write.
    """
    return (bytes([START, SEND_STD]) + addr.to_bytes() +
            bytes([DIRECT_FLAGS, cmd1, cmd2]))


#===========================================================================
def get_record(first):
    """Build a database record request frame.

    Args:
      first (bool):  True to request the first record, False for the next.

    Returns:
      bytes:  Returns the frame to write.
    """
    return bytes([START, GET_FIRST if first else GET_NEXT])


#===========================================================================
def is_echo(frame, out):
    """See if a decoded frame is the modem echo of an output frame.
    """
    return (isinstance(frame, Echo) and frame.code == out[1] and
            frame.data == out[2:])


#===========================================================================
def frame_size(buf):
    """Size of the frame at the start of a buffer.

    Args:
      buf (bytes):  Buffer with START at index 0 and at least 2 bytes.

    Returns:
      int:  Returns the frame size or None if the code is unknown.
    """
    code = buf[1]
    if code == SEND_STD and len(buf) > 5 and buf[5] & EXT_BIT:
        return SEND_EXT_SIZE

    return SIZES.get(code, None)


#===========================================================================
def decode(raw):
    """Decode a complete frame.

    Args:
      raw (bytes):  One complete frame (see frame_size()).

    Returns:
      Returns an Echo, Standard, or LinkRecord.  None is returned for frame
      codes that aren't decoded.
    """
    code = raw[1]
    if code == STD_RECEIVED:
        return Standard(Address.from_bytes(raw, 2), Address.from_bytes(raw, 5),
                        MsgType(raw[8] >> 5), raw[9], raw[10])

    elif code == LINK_RECORD:
        flags = raw[2]
        return LinkRecord(Address.from_bytes(raw, 4), raw[3],
                          bool(flags & 0x80), bool(flags & 0x40))

    elif code in (SEND_STD, GET_FIRST, GET_NEXT):
        return Echo(code, bytes(raw[2:-1]), raw[-1] == ACK)

    return None


#===========================================================================
def pop(buf):
    """Remove and decode the next frame in a read buffer.

    Bytes before a START byte are thrown away.  A START followed by an
    unknown code is dropped one byte at a time until the stream lines up
    again.  Known frames that aren't decoded are removed and skipped.

    Args:
      buf (bytearray):  The read buffer.  Used bytes are removed.

    Returns:
      Returns the decoded frame or None if there isn't a complete frame in
      the buffer.
    """
    while True:
        start = buf.find(START)
        if start < 0:
            buf.clear()
            return None

        del buf[:start]
        if len(buf) < 2:
            return None

        size = frame_size(buf)
        if size is None:
            del buf[:1]
            continue

        if len(buf) < size:
            return None

        raw = bytes(buf[:size])
        del buf[:size]

        frame = decode(raw)
        if frame is not None:
            return frame

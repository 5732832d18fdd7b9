#===========================================================================
#
# Insteon Address class
#
#===========================================================================
from .errors import InvalidArgumentError


class Address:
    """Insteon address class.

    This class stores an Insteon 3 byte device address.  Device id strings
    from the link database are parsed into an Address by the PLM driver so
    that 'aabbcc', 'AA.BB.CC' and 'aa:bb:cc' all refer to the same device.

    Once constructed, the address has the following attributes:
    - id    (int) The integer ID of the address.
    - ids   ([int]) List of the three byte ID's of the address.
    - hex   (str) A nicely formatted hex string of the address.

    The Address class supports hash and comparisons so it can be used as a
    dictionary key.
    """
    #-----------------------------------------------------------------------
    @staticmethod
    def from_bytes(raw, offset=0):
        """Read an Address from a list of bytes.

        Args:
          raw (bytes):  The bytearray or list of bytes to read from.
          offset (int):  The offset in raw to start reading at.

        Returns:
          Address: Returns the created Address object.
        """
        return Address(raw[0 + offset], raw[1 + offset], raw[2 + offset])

    #-----------------------------------------------------------------------
    def __init__(self, addr, addr2=None, addr3=None):
        """Construct an Address object.

        Valid single field inputs are:

        - String containing the hex address in upper or lower case.  Valid
          inputs have the form 'AABBCC', 'AA.BB.CC', 'AA:BB:CC', or
          'AA BB CC'
        - Integer address (6 byte integer)
        - An existing Address object to copy.

        Valid three field inputs are integers in the range 0 -> 255.

        Raises:
          InvalidArgumentError if the input can't be parsed.

        Args:
          addr:   Insteon address input.
          addr2:  Optional 2nd address input.
          addr3:  Optional 3rd address input.
        """
        if addr is None or (addr2 is None) != (addr3 is None):
            raise InvalidArgumentError(
                "Error trying to parse an Insteon address.  The input can be "
                "a single integer or string or 3 bytes.  Inputs: %s, %s, %s"
                % (addr, addr2, addr3))

        if addr2 is None:
            id1, id2, id3 = self._addr1_to_ids(addr)
        else:
            id1, id2, id3 = self._addr3_to_ids(addr, addr2, addr3)

        self.ids = [id1, id2, id3]
        self.id = (id1 << 16) | (id2 << 8) | id3
        self.bytes = bytes(self.ids)
        self.hex = ("%02X.%02X.%02X" % tuple(self.ids)).lower()

    #-----------------------------------------------------------------------
    def to_bytes(self):
        """Write an Address to a list of bytes.

        Returns:
          bytes: Returns the the three byte address as a bytes.
        """
        return self.bytes

    #-----------------------------------------------------------------------
    def __hash__(self):
        return self.id.__hash__()

    #-----------------------------------------------------------------------
    def __eq__(self, rhs):
        return isinstance(rhs, Address) and self.id == rhs.id

    #-----------------------------------------------------------------------
    def __lt__(self, rhs):
        return self.id < rhs.id

    #-----------------------------------------------------------------------
    def __str__(self):
        return self.hex

    #-----------------------------------------------------------------------
    def _addr1_to_ids(self, addr):
        """Convert a single input to the three address bytes.

        Arg:
          addr:  Single string or integer address specification.

        Returns:
          (int, int, int): Returns the three integer ID fields.
        """
        if isinstance(addr, Address):
            return addr.ids

        elif isinstance(addr, str):
            # Handles 'AABBCC' 'AA.BB.CC' 'AA:BB:CC' 'AA BB CC'
            s = addr.replace(".", "").replace(":", "").replace(" ", "").strip()
            try:
                id = int(s, 16)
            except ValueError:
                raise InvalidArgumentError(
                    "Error trying to parse an Insteon address.  Invalid hex "
                    "string: '%s'" % addr)

        # bool is an int subclass but never a valid address.
        elif isinstance(addr, int) and not isinstance(addr, bool):
            id = addr

        else:
            raise InvalidArgumentError(
                "Error trying to parse an Insteon address.  The input "
                "address must be an integer or string: %s" % addr)

        if id < 0 or id > 0xFFFFFF:
            raise InvalidArgumentError(
                "Error trying to parse an Insteon address.  The input "
                "address must be in the range 0 -> %s.  Input: %s"
                % (0xFFFFFF, addr))

        return (id >> 16 & 0xFF, id >> 8 & 0xFF, id & 0xFF)

    #-----------------------------------------------------------------------
    def _addr3_to_ids(self, a1, a2, a3):
        """Convert three integer inputs to the three address bytes.

        Arg:
          a1:  First address byte.
          a2:  Second address byte.
          a3:  Third address byte.

        Returns:
          (int, int, int): Returns the three integer ID fields.
        """
        ids = (int(a1), int(a2), int(a3))
        if any(i < 0 or i > 255 for i in ids):
            raise InvalidArgumentError(
                "Error trying to parse an Insteon address.  The input "
                "integer values must be in the range 0->255 (0x00-0xFF).  "
                "Inputs: %s, %s, %s" % (a1, a2, a3))

        return ids

    #-----------------------------------------------------------------------

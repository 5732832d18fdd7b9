#===========================================================================
#
# Misc utilities
#
#===========================================================================
import binascii
import io
from .errors import InvalidArgumentError


def to_hex(data, num=None, space=' '):
    """Convert a byte array to a string of hex.

    Args:
      data (bytes): Bytes array to output.
      num (int):  Number of bytes to output or None for all.
      space (str):  String to space out the byte outputs.

    Returns:
      str: Returns a string of the printed bytes.
    """
    if num:
        data = data[:num]

    hex_str = binascii.hexlify(data).decode()

    o = io.StringIO()
    for i in range(0, len(hex_str), 2):
        if i:
            o.write(space)
        o.write(hex_str[i])
        o.write(hex_str[i + 1])

    return o.getvalue()


#===========================================================================
def check_device_id(device_id):
    """Check that a device id is a non-empty string.

    Raises:
      InvalidArgumentError if the device id is None, empty, or not a string.

    Args:
      device_id (str):  The device id to check.

    Returns:
      str: Returns the device id with surrounding white space removed.
    """
    if not isinstance(device_id, str) or not device_id.strip():
        raise InvalidArgumentError("Device id must be a non-empty string: %r"
                                   % (device_id,))

    return device_id.strip()

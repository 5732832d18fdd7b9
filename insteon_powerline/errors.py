#===========================================================================
#
# Error classes
#
#===========================================================================

__doc__ = """Exceptions raised by the package.

Argument and capability errors are raised before any I/O is attempted.  The
I/O errors (ModemCommunicationError, DeviceConnectionError, and
CommandDispatchError) carry the driver's diagnostic text unchanged in the
'diagnostic' attribute and are chained to the driver exception.
"""


class Error(Exception):
    """Base class for all the package errors.
    """
    def __init__(self, msg, diagnostic=None):
        """Constructor

        Args:
          msg (str):  The error message.
          diagnostic (str):  The underlying transport diagnostic or None if
                     the error didn't come from the transport.
        """
        super().__init__(msg)
        self.diagnostic = diagnostic


#===========================================================================
class InvalidArgumentError(Error, ValueError):
    """A caller contract violation (empty device id, bad ramp level, etc).
    """


#===========================================================================
class UnsupportedCapabilityError(Error):
    """The requested operation exceeds the device capability tier.
    """


#===========================================================================
class ModemCommunicationError(Error):
    """The modem couldn't be queried (all link database unreadable).
    """


#===========================================================================
class DeviceConnectionError(Error):
    """A specific device couldn't be connected to.
    """
    def __init__(self, device_id, diagnostic):
        """Constructor

        Args:
          device_id (str):  The device id the connection was attempted for.
          diagnostic (str):  The transport diagnostic of the failure.
        """
        super().__init__("Device %s connection failed: %s" %
                         (device_id, diagnostic), diagnostic)
        self.device_id = device_id


#===========================================================================
class CommandDispatchError(Error):
    """A valid command failed in transit or on the device.
    """


#===========================================================================
class TransportError(Exception):
    """Transport or protocol level failure raised by a driver.

    The exception message is the diagnostic text.  It's carried unchanged
    into the package errors that wrap it.
    """

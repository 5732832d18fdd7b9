#===========================================================================
#
# Generic device class
#
#===========================================================================
from ..errors import CommandDispatchError, TransportError
from .. import catalog
from .. import log
from .Capability import Capability

LOG = log.get_logger()


class Generic:
    """Connected device handle with no commands.

    This is the base for all the device tiers.  It holds the modem the
    device was connected through and the driver handle from the connection.
    Devices are created by the connection functions - see device.create().

    The capability class attribute is the device tier.  It never changes
    for a handle.  Code that needs a tier should check it with
    capability.includes() instead of looking for methods.
    """
    capability = Capability.GENERIC

    #-----------------------------------------------------------------------
    def __init__(self, modem, handle):
        """Constructor

        Args:
          modem (Modem):  The modem the device was connected through.
          handle (Handle):  The driver handle returned by the connection.
        """
        self.modem = modem
        self.handle = handle
        self.device_id = handle.device_id
        self.product = catalog.describe(handle.dev_cat, handle.sub_cat)

        # Make a nice label to make logging easier.
        self.label = self.device_id
        if self.product.description:
            self.label += " (%s)" % self.product.description

    #-----------------------------------------------------------------------
    def type(self):
        """Return a nice class name for the device.

        Returns:
          str:  Returns the device class name in lower case ('dimmer').
        """
        return self.__class__.__name__.lower()

    #-----------------------------------------------------------------------
    def send(self, command):
        """Send a command to the device.

        One command is sent.  Failures are not retried and the device state
        is not checked afterwards.

        Raises:
          CommandDispatchError if the driver fails to send the command.
          ModemCommunicationError if the modem has been closed.

        Args:
          command (Command):  The command to send.
        """
        session = self.modem.get_session()
        try:
            self.modem.driver.send(session, self.handle, command)
        except TransportError as e:
            self.modem.last_error = str(e)
            LOG.error("Device %s command %r failed: %s", self.label, command,
                      e)
            raise CommandDispatchError(
                "Device %s command %r failed: %s" % (self.label, command, e),
                str(e)) from e

    #-----------------------------------------------------------------------
    def __str__(self):
        return "%s %s" % (self.type(), self.label)

    #-----------------------------------------------------------------------

#===========================================================================
#
# Transport driver interface
#
#===========================================================================


class Handle:
    """Connected device information returned by Driver.connect().

    The category fields are what the device reported about itself when it
    was connected to.  They decide which device tier is used for it.
    """
    def __init__(self, device_id, dev_cat, sub_cat=0x00, firmware=None):
        """Constructor

        Args:
          device_id (str):  The device id that was connected to.
          dev_cat (int):  The device category ID.
          sub_cat (int):  The device sub-category ID.
          firmware (int):  The device firmware version if known.
        """
        self.device_id = device_id
        self.dev_cat = dev_cat
        self.sub_cat = sub_cat
        self.firmware = firmware

    #-----------------------------------------------------------------------
    def __str__(self):
        return "%s cat: %#04x sub: %#04x" % (self.device_id, self.dev_cat,
                                            self.sub_cat)


#===========================================================================
class Driver:
    """Transport driver API.

    A driver owns the transport and the protocol encoding.  Every call is
    blocking.  Failures must raise TransportError with a diagnostic message.
    A session object returned by open() is passed back in to every other
    call.  Only one caller may use a session at a time.
    """
    #-----------------------------------------------------------------------
    def open(self, port):
        """Open a modem session.

        Args:
          port (str):  The transport identifier (serial device or URL).

        Returns:
          Returns the session object.
        """
        raise NotImplementedError("%s.open() not implemented" %
                                  self.__class__)

    #-----------------------------------------------------------------------
    def close(self, session):
        """Close a modem session.

        Args:
          session:  The session returned by open().
        """
        raise NotImplementedError("%s.close() not implemented" %
                                  self.__class__)

    #-----------------------------------------------------------------------
    def read_link_db(self, session):
        """Read the modem all link database.

        Args:
          session:  The session returned by open().

        Returns:
          [LinkRecord]:  Returns the database records in modem order with one
          record per device.
        """
        raise NotImplementedError("%s.read_link_db() not implemented" %
                                  self.__class__)

    #-----------------------------------------------------------------------
    def connect(self, session, device_id):
        """Connect to a device.

        Args:
          session:  The session returned by open().
          device_id (str):  The device to connect to.

        Returns:
          Handle:  Returns the connected device information.
        """
        raise NotImplementedError("%s.connect() not implemented" %
                                  self.__class__)

    #-----------------------------------------------------------------------
    def send(self, session, handle, command):
        """Send a command to a connected device.

        Args:
          session:  The session returned by open().
          handle (Handle):  The handle returned by connect().
          command (Command):  The command to send.
        """
        raise NotImplementedError("%s.send() not implemented" %
                                  self.__class__)

    #-----------------------------------------------------------------------

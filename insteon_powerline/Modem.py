#===========================================================================
#
# Insteon modem class.
#
#===========================================================================
from . import connect
from . import log
from .errors import (InvalidArgumentError, ModemCommunicationError,
                     TransportError)
from .LinkDb import fetch as fetch_link_db

LOG = log.get_logger()


class Modem:
    """Insteon powerline modem class.

    The modem is the serial attached controller that all the device
    commands go through.  It holds the driver and the open driver session
    for the port.  Use open() (or get_modem()) to open the session and
    close() when finished - the modem can also be used as a context manager.

    A modem (and the devices connected through it) must only be used by one
    caller at a time.  There is no locking - the driver session only
    handles one command at a time.

    The last_error attribute is the diagnostic of the last failed driver
    call or None if no call has failed.  Errors are always raised to the
    caller, last_error is only kept for reporting.
    """
    def __init__(self, port, driver):
        """Constructor

        The modem is not opened until open() is called.

        Args:
          port (str):  The transport identifier (serial device or URL).
          driver (Driver):  The transport driver to use.
        """
        if not isinstance(port, str) or not port.strip():
            raise InvalidArgumentError("Modem port must be a non-empty "
                                       "string: %r" % (port,))

        self.port = port
        self.driver = driver
        self.session = None
        self.last_error = None
        self.label = "modem (%s)" % port

        # All link database snapshot.  Only set when a read asks for it to be
        # cached - see LinkDb.fetch().
        self.db_cache = None

    #-----------------------------------------------------------------------
    def open(self):
        """Open the driver session.

        Raises:
          ModemCommunicationError if the driver can't open the port.
        """
        if self.session is not None:
            return

        try:
            self.session = self.driver.open(self.port)
        except TransportError as e:
            self.last_error = str(e)
            LOG.error("Modem %s open failed: %s", self.label, e)
            raise ModemCommunicationError(
                "Modem %s open failed: %s" % (self.label, e), str(e)) from e

        LOG.info("Modem %s opened", self.label)

    #-----------------------------------------------------------------------
    def close(self):
        """Close the driver session.

        Nothing is done if the modem isn't open.  Device handles connected
        through the modem can't be used after this.  The modem is marked
        closed even if the driver fails to close the port.

        Raises:
          ModemCommunicationError if the driver fails to close the port.
        """
        if self.session is None:
            return

        session, self.session = self.session, None
        self.db_cache = None
        try:
            self.driver.close(session)
        except TransportError as e:
            self.last_error = str(e)
            LOG.error("Modem %s close failed: %s", self.label, e)
            raise ModemCommunicationError(
                "Modem %s close failed: %s" % (self.label, e), str(e)) from e

        LOG.info("Modem %s closed", self.label)

    #-----------------------------------------------------------------------
    def is_open(self):
        """Return True if the driver session is open.
        """
        return self.session is not None

    #-----------------------------------------------------------------------
    def get_session(self):
        """Return the open driver session.

        Raises:
          ModemCommunicationError if the modem isn't open.
        """
        if self.session is None:
            raise ModemCommunicationError("Modem %s is not open" % self.label)

        return self.session

    #-----------------------------------------------------------------------
    def link_db(self, cache=False):
        """Read the modem all link database.

        See LinkDb.fetch() for details.

        Args:
          cache (bool):  True to use and keep a cached snapshot.

        Returns:
          LinkDb:  Returns the database snapshot.
        """
        return fetch_link_db(self, cache)

    #-----------------------------------------------------------------------
    def connect(self, device_id):
        """Connect to a device.

        See connect.connect_device() for details.

        Args:
          device_id (str):  The device to connect to.

        Returns:
          Returns the connected device.
        """
        return connect.connect_device(self, device_id)

    #-----------------------------------------------------------------------
    def connect_all(self):
        """Connect to all the devices in the modem database.

        See connect.ConnectAll for details.

        Returns:
          ConnectAll:  Returns the lazy sequence of (device_id, result)
          tuples.
        """
        return connect.connect_all(self)

    #-----------------------------------------------------------------------
    def __enter__(self):
        self.open()
        return self

    #-----------------------------------------------------------------------
    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    #-----------------------------------------------------------------------
    def __str__(self):
        return self.label

    #-----------------------------------------------------------------------

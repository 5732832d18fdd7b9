#===========================================================================
#
# Device connection functions
#
#===========================================================================
from . import device
from . import log
from . import util
from .LinkDb import fetch as fetch_link_db
from .errors import (DeviceConnectionError, InvalidArgumentError,
                     TransportError)

LOG = log.get_logger()


#===========================================================================
def connect_device(modem, device_id):
    """Connect to a single device.

    One connection attempt is made - there are no retries.

    Raises:
      InvalidArgumentError if the device id is empty or not a string.  This
      is checked before any I/O is done.
      DeviceConnectionError if the connection fails.  The driver diagnostic
      is in the error diagnostic attribute and the driver exception is
      chained to it.
      ModemCommunicationError if the modem has been closed.

    Args:
      modem (Modem):  The modem to connect through.
      device_id (str):  The device to connect to.

    Returns:
      Returns the connected device.  The class is the device tier (see the
      device module) for what the device reported.
    """
    device_id = util.check_device_id(device_id)
    session = modem.get_session()

    LOG.info("Modem %s connecting to device %s", modem.label, device_id)
    try:
        handle = modem.driver.connect(session, device_id)
    except TransportError as e:
        modem.last_error = str(e)
        LOG.error("Device %s connection failed: %s", device_id, e)
        raise DeviceConnectionError(device_id, str(e)) from e

    return device.create(modem, handle)


#===========================================================================
def connect_all(modem):
    """Connect to every device in the modem all link database.

    See ConnectAll for details.

    Args:
      modem (Modem):  The modem to connect through.

    Returns:
      ConnectAll:  Returns the lazy connection sequence.
    """
    return ConnectAll(modem)


#===========================================================================
class ConnectAll:
    """Lazy sequence of connection results for all the database devices.

    Iterating reads the modem all link database and then connects to each
    device in database order, one at a time.  Each item is a tuple of
    (device_id, result) where result is the connected device or the
    DeviceConnectionError for that device.  A failed connection doesn't stop
    the iteration - every record in the database produces one result.

    Nothing is read from the modem until iteration starts.  Each new
    iteration reads the database again and starts over from the first
    record.

    If the database can't be read, ModemCommunicationError is raised from
    the iteration.
    """
    def __init__(self, modem):
        """Constructor

        Args:
          modem (Modem):  The modem to connect through.
        """
        self.modem = modem

    #-----------------------------------------------------------------------
    def __iter__(self):
        db = fetch_link_db(self.modem)
        LOG.info("Modem %s connecting to %d devices", self.modem.label,
                 len(db))

        num_fail = 0
        for record in db:
            try:
                result = connect_device(self.modem, record.device_id)
            except DeviceConnectionError as e:
                # Report the failure for this record and keep going.
                num_fail += 1
                result = e
            except InvalidArgumentError as e:
                # Bad id in the database from the driver.
                LOG.error("Modem %s database record has an invalid device "
                          "id: %r", self.modem.label, record.device_id)
                num_fail += 1
                result = DeviceConnectionError(record.device_id, str(e))

            yield record.device_id, result

        LOG.info("Modem %s connected to %d of %d devices", self.modem.label,
                 len(db) - num_fail, len(db))

    #-----------------------------------------------------------------------

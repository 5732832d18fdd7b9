#===========================================================================
#
# Modem all link database snapshot
#
#===========================================================================
import collections
import io
from . import log
from .errors import ModemCommunicationError, TransportError

LOG = log.get_logger()

# One paired device in the modem all link database.  device_id is the only
# required field.  group and is_controller are from the first database
# record for the device if the driver reports them.
LinkRecord = collections.namedtuple('LinkRecord',
                                    ['device_id', 'group', 'is_controller'],
                                    defaults=[None, None])


#===========================================================================
def fetch(modem, cache=False):
    """Read the all link database from a modem.

    Every call reads the database from the modem unless cache is True.  With
    cache=True, the snapshot from the last cached read is returned if there
    is one, otherwise the database is read and remembered on the modem.

    Raises:
      ModemCommunicationError if the database can't be read.  The modem
      last_error is set to the driver diagnostic.

    Args:
      modem (Modem):  The modem to read from.
      cache (bool):  True to use and keep a cached snapshot.

    Returns:
      LinkDb:  Returns the database snapshot.
    """
    if cache and modem.db_cache is not None:
        return modem.db_cache

    session = modem.get_session()
    try:
        records = modem.driver.read_link_db(session)
    except TransportError as e:
        modem.last_error = str(e)
        LOG.error("Modem %s database read failed: %s", modem.label, e)
        raise ModemCommunicationError(
            "Modem %s database read failed: %s" % (modem.label, e),
            str(e)) from e

    db = LinkDb(modem.port, records)
    LOG.info("Modem %s database read %d records", modem.label, len(db))
    if cache:
        modem.db_cache = db

    return db


#===========================================================================
class LinkDb:
    """Modem all link database snapshot.

    This is a read only, ordered list of LinkRecord objects in the order
    the modem reported them.  It's not updated if the modem database
    changes after it was read.
    """
    def __init__(self, port, records):
        """Constructor

        Args:
          port (str):  The port of the modem the records were read from.
          records:  Iterable of LinkRecord objects.
        """
        self.port = port
        self.entries = tuple(records)

    #-----------------------------------------------------------------------
    def device_ids(self):
        """Return the list of device ids in database order.
        """
        return [i.device_id for i in self.entries]

    #-----------------------------------------------------------------------
    def find(self, device_id):
        """Find the record for a device.

        Args:
          device_id (str):  The device id to find.  Matching is case
                    insensitive.

        Returns:
          LinkRecord:  Returns the record or None if it's not in the
          database.
        """
        device_id = device_id.lower()
        for entry in self.entries:
            if entry.device_id.lower() == device_id:
                return entry

        return None

    #-----------------------------------------------------------------------
    def __len__(self):
        return len(self.entries)

    #-----------------------------------------------------------------------
    def __iter__(self):
        return iter(self.entries)

    #-----------------------------------------------------------------------
    def __getitem__(self, index):
        return self.entries[index]

    #-----------------------------------------------------------------------
    def __str__(self):
        o = io.StringIO()
        o.write("LinkDb %s:\n" % self.port)
        for entry in self.entries:
            o.write("  %s" % entry.device_id)
            if entry.group is not None:
                o.write(" grp: %s" % entry.group)
            if entry.is_controller is not None:
                o.write(" %s" % ("CTRL" if entry.is_controller else "RESP"))
            o.write("\n")

        return o.getvalue()

    #-----------------------------------------------------------------------

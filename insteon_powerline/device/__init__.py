#===========================================================================
#
# Insteon device classes
#
#===========================================================================
# flake8: noqa

__doc__ = """Device handle classes.

The device classes are capability tiers: Generic (no commands), Lighting
(on/off), and Dimmer (on/off plus ramps).  Each tier has all the commands of
the tier below it.  The tier is picked when the device is connected to using
the device category that the device reports.
"""

from .. import catalog
from .. import log
from .Capability import Capability
from .Generic import Generic
from .Lighting import Lighting
from .Dimmer import Dimmer

LOG = log.get_logger()

# Device category to device class map.  Categories that aren't in the map
# use the Generic class.
tiers = {
    catalog.DIMMABLE_LIGHTING : Dimmer,
    catalog.SWITCHED_LIGHTING : Lighting,
    }


#===========================================================================
def find(dev_cat):
    """Find the device class to use for a device category.

    Args:
      dev_cat (int):  The device category ID.

    Returns:
      Returns the device class for the category.
    """
    return tiers.get(dev_cat, Generic)


#===========================================================================
def create(modem, handle):
    """Create a device from a driver connection handle.

    Args:
      modem (Modem):  The modem the device was connected through.
      handle (Handle):  The handle returned by the driver connect call.

    Returns:
      Returns the device object of the tier matching the device category.
    """
    cls = find(handle.dev_cat)
    device = cls(modem, handle)
    LOG.debug("Device %s created as %s", device.label, device.capability)
    return device

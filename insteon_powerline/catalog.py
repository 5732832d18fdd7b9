#===========================================================================
#
# Lighting product descriptions
#
#===========================================================================
import collections

__doc__ = """Insteon lighting product descriptions.

Devices report a category (dev_cat) and sub-category (sub_cat) when they're
connected to.  The category picks the device tier (see the device module)
and the pair is used here to find a model and description for logging.
"""

# Device categories with a lighting tier.  Every other category is handled
# as a generic device.
DIMMABLE_LIGHTING = 0x01
SWITCHED_LIGHTING = 0x02

Product = collections.namedtuple('Product', ['model', 'description'])

UNKNOWN = Product("Unknown", "")

# (dev_cat, sub_cat) -> Product
products = {
    (DIMMABLE_LIGHTING, 0x00) : Product("2456D3", "LampLinc"),
    (DIMMABLE_LIGHTING, 0x01) : Product("2476D", "SwitchLinc Dimmer"),
    (DIMMABLE_LIGHTING, 0x02) : Product("2475D", "In-LineLinc Dimmer"),
    (DIMMABLE_LIGHTING, 0x0e) : Product("2457D2", "LampLinc Dual-Band"),
    (DIMMABLE_LIGHTING, 0x20) : Product("2477D", "SwitchLinc Dimmer"),
    (DIMMABLE_LIGHTING, 0x2e) : Product("2475F", "FanLinc light"),
    (DIMMABLE_LIGHTING, 0x32) : Product("2475DA2", "In-LineLinc Dimmer"),
    (DIMMABLE_LIGHTING, 0x3a) : Product("2672-222", "LED Bulb"),
    (SWITCHED_LIGHTING, 0x09) : Product("2456S3", "ApplianceLinc"),
    (SWITCHED_LIGHTING, 0x0a) : Product("2476S", "SwitchLinc Relay"),
    (SWITCHED_LIGHTING, 0x2a) : Product("2477S", "SwitchLinc Relay"),
    (SWITCHED_LIGHTING, 0x37) : Product("2635-222", "On/Off Module"),
    (SWITCHED_LIGHTING, 0x39) : Product("2663-222", "On/Off Outlet"),
    }


#===========================================================================
def describe(dev_cat, sub_cat):
    """Look up the product for a device.

    Args:
      dev_cat (int):  The device category ID.
      sub_cat (int):  The device sub-category ID.

    Returns:
      Product:  Returns the product or UNKNOWN if it's not in the table.
    """
    return products.get((dev_cat, sub_cat), UNKNOWN)

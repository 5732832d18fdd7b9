#===========================================================================
#
# Caller API functions
#
#===========================================================================

__doc__ = """Caller API.

These are the functions applications use:

- get_modem(port) opens a modem.
- get_devices(modem) connects to every device in the modem database.
- get_device(modem, device_id) connects to one device.
- set_light(device, state, ramped, ramp_level) sends a light command.

Example:

  with get_modem("/dev/ttyUSB0") as modem:
      for device_id, result in get_devices(modem):
          if isinstance(result, Exception):
              print("%s failed: %s" % (device_id, result.diagnostic))

      light = get_device(modem, "44.a3.79")
      set_light(light, "on", ramped=True, ramp_level=200)
"""

from . import connect
from . import light
from . import on_off
from .driver import Plm
from .Modem import Modem


#===========================================================================
def get_modem(port, driver=None, **kwargs):
    """Open a modem.

    Raises:
      ModemCommunicationError if the modem can't be opened.

    Args:
      port (str):  The serial device or pyserial URL of the modem.
      driver (Driver):  The driver to use.  If this is None, a Plm driver
             is created using kwargs.
      kwargs:  Keyword arguments passed to the Plm constructor (baudrate,
               timeout, ramp_rate).  Ignored if driver is input.

    Returns:
      Modem:  Returns the open modem.
    """
    if driver is None:
        driver = Plm(**kwargs)

    modem = Modem(port, driver)
    modem.open()
    return modem


#===========================================================================
def get_devices(modem):
    """Connect to every device in the modem database.

    Args:
      modem (Modem):  The modem to use.

    Returns:
      ConnectAll:  Returns a lazy sequence of (device_id, result) tuples in
      database order.  result is the device or the DeviceConnectionError
      for that device.
    """
    return connect.connect_all(modem)


#===========================================================================
def get_device(modem, device_id):
    """Connect to a device.

    Args:
      modem (Modem):  The modem to use.
      device_id (str):  The device to connect to.

    Returns:
      Returns the connected device.
    """
    return connect.connect_device(modem, device_id)


#===========================================================================
def set_light(device, state, ramped=False,
              ramp_level=on_off.RAMP_LEVEL_DEFAULT):
    """Set the state of a light.

    See light.apply_light_state() for details.

    Args:
      device:  The connected device to command.
      state (on_off.State):  The state to set ('on' and 'off' are also
            accepted).
      ramped (bool):  True to ramp to the state.
      ramp_level (int):  The level [1, 255] to ramp on to.
    """
    light.apply_light_state(device, state, ramped, ramp_level)

#===========================================================================
#
# Insteon powerline Python package
#
#===========================================================================
# flake8: noqa

__doc__ = """Insteon powerline device control package

Reads the all link database of a serial powerline modem, connects to the
devices in it, and sends on/off and ramp commands to lighting devices.  See
the api module for the caller functions.
"""

__version__ = "0.1.0"

#===========================================================================

from . import catalog
from . import config
from . import connect
from . import device
from . import driver
from . import errors
from . import light
from . import log
from . import on_off
from . import util

from .Address import Address
from .LinkDb import LinkRecord
from .Modem import Modem
from .api import get_modem, get_devices, get_device, set_light
from .errors import (CommandDispatchError, DeviceConnectionError, Error,
                     InvalidArgumentError, ModemCommunicationError,
                     TransportError, UnsupportedCapabilityError)
from .on_off import State

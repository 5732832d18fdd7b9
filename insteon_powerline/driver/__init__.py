#===========================================================================
#
# Transport drivers
#
#===========================================================================
# flake8: noqa

__doc__ = """Transport and protocol drivers.

A driver implements the Driver API: open a modem session, read the modem all
link database, connect to a device, and send commands to a device.  Plm is
the serial PowerLinc modem driver.  Other drivers (or test fakes) can be
passed to the Modem instead.
"""

from . import frames
from .Command import Command
from .Driver import Driver, Handle
from ..errors import TransportError
from .Plm import Plm

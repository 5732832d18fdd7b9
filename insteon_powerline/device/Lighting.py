#===========================================================================
#
# On/off lighting device class
#
#===========================================================================
from ..driver.Command import Command
from .. import log
from .Capability import Capability
from .Generic import Generic

LOG = log.get_logger()


class Lighting(Generic):
    """On/off lighting control device.

    This is a switched light (relay switch, appliance module, etc) that can
    be turned on and off.
    """
    capability = Capability.LIGHTING

    #-----------------------------------------------------------------------
    def turn_on(self):
        """Turn the device on immediately.
        """
        LOG.info("Device %s cmd: on", self.label)
        self.send(Command.turn_on())

    #-----------------------------------------------------------------------
    def turn_off(self):
        """Turn the device off immediately.
        """
        LOG.info("Device %s cmd: off", self.label)
        self.send(Command.turn_off())

    #-----------------------------------------------------------------------

#===========================================================================
#
# Dimmable lighting device class
#
#===========================================================================
from ..driver.Command import Command
from .. import log
from .. import on_off
from .Capability import Capability
from .Lighting import Lighting

LOG = log.get_logger()


class Dimmer(Lighting):
    """Dimmable lighting control device.

    In addition to on and off, dimmers can ramp on to a level and ramp off.
    The ramp speed is the ramp rate set in the driver.
    """
    capability = Capability.DIMMABLE

    #-----------------------------------------------------------------------
    def ramp_on(self, level=on_off.RAMP_LEVEL_DEFAULT):
        """Ramp the device on to a level.

        Raises:
          InvalidArgumentError if the level is outside [1, 255].

        Args:
          level (int):  The target level in the range [1, 255].
        """
        on_off.check_ramp_level(level)
        LOG.info("Device %s cmd: ramp on to %s", self.label, level)
        self.send(Command.ramp_on(level))

    #-----------------------------------------------------------------------
    def ramp_off(self):
        """Ramp the device off.

        There is no level input - ramp off always goes all the way to off.
        """
        LOG.info("Device %s cmd: ramp off", self.label)
        self.send(Command.ramp_off())

    #-----------------------------------------------------------------------

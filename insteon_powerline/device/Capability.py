#===========================================================================
#
# Device capability tiers
#
#===========================================================================
import enum


class Capability(enum.IntEnum):
    """Device capability tier enumeration.

    The tiers are cumulative: each tier has every command of the tiers below
    it.  GENERIC devices have no commands, LIGHTING devices can be turned on
    and off, and DIMMABLE devices can also ramp on to a level and ramp off.
    """
    GENERIC = 0
    LIGHTING = 1
    DIMMABLE = 2

    def __str__(self):
        return self.name.lower()

    def includes(self, other):
        """See if this tier has all the commands of another tier.

        Args:
          other (Capability):  The tier to check for.

        Returns:
          bool:  Returns True if this tier includes the other tier.
        """
        return self >= other

#===========================================================================
#
# Light state utilities and constants.
#
#===========================================================================
import enum
from .errors import InvalidArgumentError

# Valid ramp target levels are the closed range [RAMP_LEVEL_MIN,
# RAMP_LEVEL_MAX].  RAMP_LEVEL_DEFAULT is used when the caller doesn't pick
# one.
RAMP_LEVEL_MIN = 1
RAMP_LEVEL_MAX = 255
RAMP_LEVEL_DEFAULT = 128


#===========================================================================
class State(enum.Enum):
    """Light power state enumeration.
    """
    ON = "on"
    OFF = "off"

    def __str__(self):
        return self.value

    @staticmethod
    def parse(value):
        """Convert an input to a State enumeration.

        Raises:
          InvalidArgumentError if the input isn't a valid state.

        Args:
          value:  A State or the case insensitive strings 'on' or 'off'.

        Returns:
          State: Returns the state enumeration.
        """
        if isinstance(value, State):
            return value

        if isinstance(value, str):
            try:
                return State(value.strip().lower())
            except ValueError:
                pass

        raise InvalidArgumentError("Invalid light state '%s'.  Expected one "
                                   "of: on, off" % (value,))


#===========================================================================
class Mode(enum.Enum):
    """Light transition mode enumeration.

    IMMEDIATE commands switch the light directly.  RAMPED commands move the
    light to the target level at the device ramp rate.
    """
    IMMEDIATE = "immediate"
    RAMPED = "ramped"

    def __str__(self):
        return self.value

    @staticmethod
    def from_ramped(ramped):
        """Convert a ramped boolean flag to the mode enumeration.

        Args:
          ramped (bool):  True for ramped transitions.

        Returns:
          Mode: Returns the mode enumeration.
        """
        return Mode.RAMPED if ramped else Mode.IMMEDIATE


#===========================================================================
def check_ramp_level(level):
    """Validate a ramp target level.

    Raises:
      InvalidArgumentError if the level isn't an integer in the range
      [RAMP_LEVEL_MIN, RAMP_LEVEL_MAX].

    Args:
      level (int):  The ramp target level.

    Returns:
      int: Returns the input level.
    """
    if (not isinstance(level, int) or isinstance(level, bool) or
            level < RAMP_LEVEL_MIN or level > RAMP_LEVEL_MAX):
        raise InvalidArgumentError(
            "Invalid ramp level %r.  Ramp levels must be integers in the "
            "range [%d, %d]" % (level, RAMP_LEVEL_MIN, RAMP_LEVEL_MAX))

    return level

#===========================================================================
#
# Light command values
#
#===========================================================================
import enum
from ..errors import InvalidArgumentError


class Command:
    """A single light command to send to a device.

    Commands are read only values.  The driver turns them into protocol
    messages.  Use the class constructors (turn_on(), ramp_on(), etc) to
    build them.  Only RAMP_ON carries a level - a ramp off always ramps all
    the way to off.
    """
    __slots__ = ("_type", "_level")

    class Type(enum.Enum):
        TURN_ON = "turn_on"
        TURN_OFF = "turn_off"
        RAMP_ON = "ramp_on"
        RAMP_OFF = "ramp_off"

    #-----------------------------------------------------------------------
    @classmethod
    def turn_on(cls):
        return cls(cls.Type.TURN_ON)

    #-----------------------------------------------------------------------
    @classmethod
    def turn_off(cls):
        return cls(cls.Type.TURN_OFF)

    #-----------------------------------------------------------------------
    @classmethod
    def ramp_on(cls, level):
        """Ramp on to a target level.

        Args:
          level (int):  The target level in the range [1, 255].

        Returns:
          Command:  Returns the created command.
        """
        return cls(cls.Type.RAMP_ON, level)

    #-----------------------------------------------------------------------
    @classmethod
    def ramp_off(cls):
        return cls(cls.Type.RAMP_OFF)

    #-----------------------------------------------------------------------
    def __init__(self, type, level=None):
        """Constructor

        Raises:
          InvalidArgumentError if the type isn't a Command.Type or a level
          is input for any type but RAMP_ON.

        Args:
          type (Command.Type):  The command type.
          level (int):  The target level for RAMP_ON.  Must be None for the
                other types.
        """
        if not isinstance(type, Command.Type):
            raise InvalidArgumentError("Invalid command type %r" % (type,))
        if (level is not None) != (type is Command.Type.RAMP_ON):
            raise InvalidArgumentError("Invalid level %r for a %s command" %
                                       (level, type.value))

        self._type = type
        self._level = level

    #-----------------------------------------------------------------------
    @property
    def type(self):
        return self._type

    #-----------------------------------------------------------------------
    @property
    def level(self):
        return self._level

    #-----------------------------------------------------------------------
    def __eq__(self, rhs):
        return (isinstance(rhs, Command) and self.type == rhs.type and
                self.level == rhs.level)

    #-----------------------------------------------------------------------
    def __hash__(self):
        return hash((self.type, self.level))

    #-----------------------------------------------------------------------
    def __repr__(self):
        if self.level is None:
            return "Command(%s)" % self.type.value

        return "Command(%s, %d)" % (self.type.value, self.level)

    #-----------------------------------------------------------------------

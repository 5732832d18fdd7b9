#===========================================================================
#
# Tests for: insteon_powerline/driver/Command.py
#
#===========================================================================
import pytest
import insteon_powerline as IP
from insteon_powerline.driver import Command


class Test_Command:
    def test_ctors(self):
        assert Command.turn_on().type is Command.Type.TURN_ON
        assert Command.turn_off().type is Command.Type.TURN_OFF
        assert Command.ramp_off().type is Command.Type.RAMP_OFF

        cmd = Command.ramp_on(200)
        assert cmd.type is Command.Type.RAMP_ON
        assert cmd.level == 200
        assert Command.ramp_off().level is None

    #-----------------------------------------------------------------------
    def test_eq(self):
        assert Command.turn_on() == Command.turn_on()
        assert Command.turn_on() != Command.turn_off()
        assert Command.ramp_on(10) != Command.ramp_on(11)
        assert Command.ramp_off() == Command.ramp_off()
        assert Command.turn_on() != "turn_on"
        assert len({Command.ramp_on(5), Command.ramp_on(5)}) == 1

    #-----------------------------------------------------------------------
    def test_repr(self):
        assert repr(Command.turn_on()) == "Command(turn_on)"
        assert repr(Command.ramp_on(200)) == "Command(ramp_on, 200)"

    #-----------------------------------------------------------------------
    def test_level_only_for_ramp_on(self):
        with pytest.raises(IP.InvalidArgumentError):
            Command(Command.Type.RAMP_OFF, 100)

        with pytest.raises(IP.InvalidArgumentError):
            Command(Command.Type.RAMP_ON)

    #-----------------------------------------------------------------------
    def test_bad_type(self):
        with pytest.raises(IP.InvalidArgumentError):
            Command("turn_on")

    #-----------------------------------------------------------------------
    def test_read_only(self):
        cmd = Command.ramp_on(200)
        with pytest.raises(AttributeError):
            cmd.level = 5
        with pytest.raises(AttributeError):
            cmd.type = Command.Type.TURN_OFF
        with pytest.raises(AttributeError):
            cmd.extra = 1

        assert cmd == Command.ramp_on(200)

#===========================================================================

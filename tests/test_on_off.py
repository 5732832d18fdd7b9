#===========================================================================
#
# Tests for: insteon_powerline/on_off.py
#
#===========================================================================
import pytest
import insteon_powerline as IP
from insteon_powerline.on_off import Mode, State


#===========================================================================
class Test_State:
    @pytest.mark.parametrize("value,expected", [
        (State.ON, State.ON),
        (State.OFF, State.OFF),
        ("on", State.ON),
        ("OFF", State.OFF),
        (" On ", State.ON),
        ])
    def test_parse(self, value, expected):
        assert State.parse(value) is expected

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("value", ["dim", "", None, True, 1, 0])
    def test_parse_bad(self, value):
        with pytest.raises(IP.InvalidArgumentError):
            State.parse(value)

    #-----------------------------------------------------------------------
    def test_str(self):
        assert str(State.ON) == "on"
        assert str(State.OFF) == "off"


#===========================================================================
class Test_Mode:
    def test_from_ramped(self):
        assert Mode.from_ramped(True) is Mode.RAMPED
        assert Mode.from_ramped(False) is Mode.IMMEDIATE
        assert str(Mode.RAMPED) == "ramped"
        assert str(Mode.IMMEDIATE) == "immediate"


#===========================================================================
class Test_ramp_level:
    @pytest.mark.parametrize("level", [1, 2, 128, 254, 255])
    def test_valid(self, level):
        assert IP.on_off.check_ramp_level(level) == level

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("level", [0, 256, -1, 1000, 1.0, 128.5, "128",
                                       None, True, False])
    def test_invalid(self, level):
        with pytest.raises(IP.InvalidArgumentError):
            IP.on_off.check_ramp_level(level)

    #-----------------------------------------------------------------------
    def test_constants(self):
        assert IP.on_off.RAMP_LEVEL_MIN == 1
        assert IP.on_off.RAMP_LEVEL_MAX == 255
        assert IP.on_off.RAMP_LEVEL_DEFAULT == 128

#===========================================================================

#===========================================================================
#
# Tests for: insteon_powerline/device/Dimmer.py
#
#===========================================================================
import pytest
import insteon_powerline as IP
from insteon_powerline.device import Dimmer
from insteon_powerline.driver import Command
import helpers as H


@pytest.fixture
def test_device():
    '''
    Returns a generically configured dimmer for testing
    '''
    driver = H.main.MockDriver()
    modem = H.main.make_modem(driver)
    handle = IP.driver.Handle("44.a3.79", 0x01, 0x20, 0x41)
    return Dimmer(modem, handle)


class Test_Dimmer:
    def test_ctor(self, test_device):
        assert test_device.capability == IP.device.Capability.DIMMABLE
        assert test_device.capability.includes(IP.device.Capability.LIGHTING)
        assert test_device.type() == "dimmer"
        assert isinstance(test_device, IP.device.Lighting)

    #-----------------------------------------------------------------------
    def test_commands(self, test_device):
        test_device.turn_on()
        test_device.ramp_on(200)
        test_device.ramp_on()
        test_device.ramp_off()
        test_device.turn_off()
        assert [i[1] for i in test_device.modem.driver.sent] == [
            Command.turn_on(),
            Command.ramp_on(200),
            Command.ramp_on(128),
            Command.ramp_off(),
            Command.turn_off(),
            ]

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("level", [0, 256, None, 12.5])
    def test_bad_level(self, test_device, level):
        with pytest.raises(IP.InvalidArgumentError):
            test_device.ramp_on(level)

        assert test_device.modem.driver.sent == []

#===========================================================================

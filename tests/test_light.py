#===========================================================================
#
# Tests for: insteon_powerline/light.py
#
#===========================================================================
import pytest
import insteon_powerline as IP
from insteon_powerline.device import Dimmer, Generic, Lighting
from insteon_powerline.driver import Command
from insteon_powerline.light import apply_light_state
from insteon_powerline.on_off import State
import helpers as H


@pytest.fixture
def driver():
    return H.main.MockDriver()


#===========================================================================
class Test_apply_light_state:
    @pytest.mark.parametrize("state,ramped,level,expected", [
        (State.ON, False, 128, Command.turn_on()),
        (State.OFF, False, 128, Command.turn_off()),
        (State.ON, True, 200, Command.ramp_on(200)),
        (State.ON, True, 1, Command.ramp_on(1)),
        (State.ON, True, 255, Command.ramp_on(255)),
        (State.OFF, True, 200, Command.ramp_off()),
        ])
    def test_dimmer(self, driver, state, ramped, level, expected):
        device = H.main.make_device(Dimmer, driver, "A")
        apply_light_state(device, state, ramped, level)
        assert driver.sent == [("A", expected)]

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("state,expected", [
        (State.ON, Command.turn_on()),
        (State.OFF, Command.turn_off()),
        ])
    def test_lighting(self, driver, state, expected):
        device = H.main.make_device(Lighting, driver, "A", 0x02)
        apply_light_state(device, state)
        assert driver.sent == [("A", expected)]

    #-----------------------------------------------------------------------
    def test_default_level(self, driver):
        device = H.main.make_device(Dimmer, driver, "A")
        apply_light_state(device, State.ON, ramped=True)
        assert driver.sent == [("A", Command.ramp_on(128))]

    #-----------------------------------------------------------------------
    def test_string_state(self, driver):
        device = H.main.make_device(Dimmer, driver, "A")
        apply_light_state(device, "on")
        apply_light_state(device, "OFF", ramped=True)
        assert driver.sent == [("A", Command.turn_on()),
                               ("A", Command.ramp_off())]

    #-----------------------------------------------------------------------
    def test_ramp_off_ignores_level(self, driver):
        device = H.main.make_device(Dimmer, driver, "A")
        apply_light_state(device, State.OFF, True, 10)
        apply_light_state(device, State.OFF, True, 250)
        assert driver.sent[0] == driver.sent[1]
        assert driver.sent[0] == ("A", Command.ramp_off())

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("cls", [Generic, Lighting])
    @pytest.mark.parametrize("state", [State.ON, State.OFF])
    def test_ramp_not_dimmable(self, driver, cls, state):
        device = H.main.make_device(cls, driver, "A", 0x02)

        # Same result every time - nothing is sent.
        for i in range(3):
            with pytest.raises(IP.UnsupportedCapabilityError):
                apply_light_state(device, state, True, 100)

        assert driver.sent == []

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("state", [State.ON, State.OFF])
    def test_generic_immediate(self, driver, state):
        device = H.main.make_device(Generic, driver, "A", 0x07)
        with pytest.raises(IP.UnsupportedCapabilityError):
            apply_light_state(device, state)

        assert driver.sent == []

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("cls", [Generic, Lighting, Dimmer])
    @pytest.mark.parametrize("level", [0, 256, -5, 128.0, None, True])
    @pytest.mark.parametrize("state,ramped", [
        (State.ON, True), (State.OFF, True), (State.ON, False),
        (State.OFF, False)])
    def test_bad_level(self, driver, cls, level, state, ramped):
        device = H.main.make_device(cls, driver, "A")
        with pytest.raises(IP.InvalidArgumentError):
            apply_light_state(device, state, ramped, level)

        assert driver.sent == []

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("state", ["dim", "", None, 1])
    def test_bad_state(self, driver, state):
        device = H.main.make_device(Dimmer, driver, "A")
        with pytest.raises(IP.InvalidArgumentError):
            apply_light_state(device, state)

        assert driver.sent == []

    #-----------------------------------------------------------------------
    @pytest.mark.parametrize("device", [None, "A", object()])
    def test_bad_device(self, device):
        with pytest.raises(IP.InvalidArgumentError):
            apply_light_state(device, State.ON)

    #-----------------------------------------------------------------------
    def test_dispatch_error(self, driver):
        error = IP.TransportError("Device 44.a3.79 NAK of command 0x2e: 0xfd")
        driver.send_error = error
        device = H.main.make_device(Dimmer, driver, "44.a3.79")

        with pytest.raises(IP.CommandDispatchError) as exc:
            apply_light_state(device, State.ON, True, 200)

        assert exc.value.diagnostic == str(error)
        assert exc.value.__cause__ is error
        assert device.modem.last_error == str(error)

        # Exactly one attempt.
        assert driver.sent == [("44.a3.79", Command.ramp_on(200))]

    #-----------------------------------------------------------------------
    def test_set_light(self, driver):
        device = H.main.make_device(Dimmer, driver, "A")
        IP.set_light(device, State.ON, ramped=True, ramp_level=200)
        IP.set_light(device, "off")
        assert driver.sent == [("A", Command.ramp_on(200)),
                               ("A", Command.turn_off())]

#===========================================================================

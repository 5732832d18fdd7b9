#===========================================================================
#
# Light command functions
#
#===========================================================================
from .device import Capability, Generic
from .errors import InvalidArgumentError, UnsupportedCapabilityError
from . import log
from . import on_off

LOG = log.get_logger()


#===========================================================================
def apply_light_state(device, state, ramped=False,
                      ramp_level=on_off.RAMP_LEVEL_DEFAULT):
    """Send a light state command to a device.

    The state and mode pick the command to send:

    - ON, immediate: turn_on()
    - OFF, immediate: turn_off()
    - ON, ramped: ramp_on(ramp_level)
    - OFF, ramped: ramp_off()  (ramp_level isn't used)

    All the input checks are done before anything is sent.  Then exactly one
    command is sent to the device.  The command isn't retried and the device
    state isn't read back to check it.

    Raises:
      InvalidArgumentError if the device isn't a device handle, the state is
      invalid, or ramp_level isn't an integer in [1, 255].  ramp_level is
      checked on every call, even when it isn't used.
      UnsupportedCapabilityError if ramped is True and the device isn't
      dimmable or if the device isn't a lighting device.
      CommandDispatchError if sending the command fails.

    Args:
      device:  The connected device to command.
      state (on_off.State):  The state to set.  The strings 'on' and 'off'
            are also accepted.
      ramped (bool):  True to ramp to the state instead of switching
             immediately.
      ramp_level (int):  The level to ramp on to.
    """
    if not isinstance(device, Generic):
        raise InvalidArgumentError("Invalid device %r - a connected device is "
                                   "required" % (device,))

    state = on_off.State.parse(state)
    on_off.check_ramp_level(ramp_level)
    mode = on_off.Mode.from_ramped(ramped)

    required = Capability.DIMMABLE if ramped else Capability.LIGHTING
    if not device.capability.includes(required):
        if ramped:
            msg = "ramping requires a dimmable device"
        else:
            msg = "on/off requires a lighting device"

        LOG.error("Device %s (%s) rejected %s %s: %s", device.label,
                  device.capability, state, mode, msg)
        raise UnsupportedCapabilityError(msg)

    LOG.debug("Device %s setting state %s %s", device.label, state, mode)
    if mode is on_off.Mode.IMMEDIATE:
        if state is on_off.State.ON:
            device.turn_on()
        else:
            device.turn_off()

    elif state is on_off.State.ON:
        device.ramp_on(ramp_level)

    else:
        device.ramp_off()

#===========================================================================
#
# Configuration file
#
#===========================================================================

__doc__ = """Configuration file loading and validation.

The configuration file is YAML with two sections:

logging:
  level: 20                     # python logging level
  screen: true
  file: !rel_path powerline.log # path relative to the config file

insteon:
  port: /dev/ttyUSB0            # serial device, COM port, or pyserial URL
  baudrate: 19200
  timeout: 5                    # seconds to wait for each modem reply
  ramp_rate: 13                 # ramp rate [0, 15] used by the ramp commands

Only insteon.port is required.  The file is checked against the cerberus
schema in data/config-schema.yaml.
"""

#===========================================================================
import os.path
import re
import cerberus
import yaml
from . import api
from . import log
from .errors import InvalidArgumentError

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), 'data',
                           'config-schema.yaml')

# Device paths, Windows COM ports, and pyserial URLs (socket://, loop://).
PORT_RE = re.compile(r"^(/\S+|COM\d+|[a-z][a-z0-9+]*://\S*)$", re.IGNORECASE)

# insteon section keys passed to the Plm driver constructor.
DRIVER_KEYS = ('baudrate', 'timeout', 'ramp_rate')


#===========================================================================
def load(path):
    """Load a configuration file.

    Args:
      path (str):  The file to load.

    Returns:
      dict:  Returns the loaded configuration.
    """
    with open(path, "r") as f:
        return yaml.load(f, Loader=Loader)


#===========================================================================
def check(config):
    """Check a loaded configuration against the schema.

    Args:
      config (dict):  The loaded configuration.

    Returns:
      [str]:  Returns the list of 'key.path: message' errors.  The list is
      empty if the configuration is valid.
    """
    if not isinstance(config, dict):
        return ["configuration must be a mapping with an insteon section"]

    with open(SCHEMA_FILE, "r") as f:
        schema = yaml.safe_load(f)

    validator = Validator(schema)
    if validator.validate(config):
        return []

    return _flatten(validator.errors)


#===========================================================================
def validate(path):
    """Load and check a configuration file.

    Args:
      path (str):  The file to check.

    Returns:
      str:  Returns the error report or an empty string if the file is
      valid.
    """
    errors = check(load(path))
    if not errors:
        return ""

    return "Configuration errors in %s:\n%s\n" % (
        path, "\n".join("  " + i for i in errors))


#===========================================================================
def apply(config, driver=None):
    """Initialize logging and open the modem from a configuration.

    Raises:
      InvalidArgumentError if the configuration doesn't pass check().
      ModemCommunicationError if the modem can't be opened.

    Args:
      config (dict):  The loaded configuration.
      driver (Driver):  Driver to use instead of a Plm driver built from
             the insteon section.

    Returns:
      Modem:  Returns the open modem.
    """
    errors = check(config)
    if errors:
        raise InvalidArgumentError("Invalid configuration: %s" %
                                   "; ".join(errors))

    log.initialize(config=config)

    insteon = config['insteon']
    kwargs = {k: insteon[k] for k in DRIVER_KEYS if k in insteon}
    return api.get_modem(insteon['port'], driver, **kwargs)


#===========================================================================
def _flatten(errors, prefix=""):
    """Convert the nested cerberus error tree to 'key.path: message' lines.
    """
    lines = []
    for field in sorted(errors, key=str):
        path = "%s%s" % (prefix, field)
        for item in errors[field]:
            if isinstance(item, dict):
                lines.extend(_flatten(item, path + "."))
            else:
                lines.append("%s: %s" % (path, item))

    return lines


#===========================================================================
class Loader(yaml.SafeLoader):
    """YAML loader with a !rel_path tag.

    file: !rel_path powerline.log

    is loaded as the path of powerline.log in the directory of the
    configuration file.
    """
    def __init__(self, stream):
        super().__init__(stream)
        name = getattr(stream, "name", None)
        self.base_dir = os.path.dirname(os.path.abspath(name)) if name else ""

    def rel_path(self, node):
        return os.path.join(self.base_dir, self.construct_scalar(node))


Loader.add_constructor('!rel_path', Loader.rel_path)


#===========================================================================
class Validator(cerberus.Validator):
    """Schema validator with a check for the modem port.
    """
    def _check_with_port(self, field, value):
        if not PORT_RE.match(value):
            self._error(field, "'%s' is not a modem port.  Use a device "
                        "path (/dev/ttyUSB0), a COM port (COM4), or a "
                        "pyserial URL (socket://host:9761)" % value)

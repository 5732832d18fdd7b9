#===========================================================================
#
# pytest setup configuration file.
#
# pylint: disable=wrong-import-position
#===========================================================================
import os
import sys
import pytest

# Add the helpers dir to the python path so tests can easily import the
# helpers module which contains common test code.
sys.path.append(os.path.join(os.path.dirname(__file__), 'util'))
import helpers as H  # noqa: E402


#===========================================================================
#
# Test fixtures
#
#===========================================================================
@pytest.fixture
def mock_serial():
    """Mock out the pyserial client.

    Use this as a test fixture and it will patch serial.serial_for_url to
    return a helpers.MockSerial client and then restore when exiting.  The
    fixture value is the client that will be returned.  See
    tests/test_api.py for an example.
    """
    import serial
    client = H.main.MockSerial()
    save = serial.serial_for_url

    def serial_for_url(url, *args, **kwargs):
        client.url = url
        client.ctor = (args, kwargs)
        return client

    serial.serial_for_url = serial_for_url
    yield client

    # Code that runs after the test is done - restore the serial module to
    # it's original state.
    serial.serial_for_url = save

#===========================================================================

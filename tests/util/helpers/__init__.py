#===========================================================================
#
# Test helpers
#
#===========================================================================
# flake8: noqa

from . import main
from .Data import Data

from .jrutils import *
from .exceptions import *
from .kinematics import *
from .event import *
from .treereader import *

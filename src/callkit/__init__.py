from .currying import *  # noqa
from .functions import *  # noqa
from .guard import *  # noqa
from .immutable import Immutable  # noqa
from .invoke import *  # noqa
from .partials import *  # noqa
from .sequence import *  # noqa

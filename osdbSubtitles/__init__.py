# -*- coding: utf-8 -*-

__version__ = '1.0.0'

from .api import OSDbApi  # noqa: E402
from .session import Session  # noqa: E402

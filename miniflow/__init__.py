# -*- coding: utf-8 -*-
__title__ = 'miniflow'
__version__ = '0.1.0'
__author__ = 'PMEAL'
__license__ = 'MIT'
__copyright__ = 'Copyright 2014 PMEAL'

from .lattice import (Lattice, ExclusiveMaterials,
    EMPTY, SOLID, FLUID, VISIBLE_COMBINED, VISIBLE_ISOLATED)
from .generation import build, InvalidParameter
from . import algorithms
from .algorithms import flood, reachable, cull
from . import projection
from . import graphics
from .simulations import FlowSimulation
from .logging_config import setup_logging

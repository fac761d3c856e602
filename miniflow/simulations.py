import logging

import numpy as np

from . import algorithms
from . import config
from .algorithms.propagation import entry_layer
from .generation import build

logger = logging.getLogger(__name__)


class FlowSimulation(object):
    '''
    One run of the percolation model, done in strict sequence:

    1) build the random lattice (done by the caller or by `random`)
    2) pour the fluid in through the entry face
    3) work out what the viewer can see, unless culling is turned off

    Like the other simulation objects, a snapshot of the lattice state is kept
    after every stage. A stage is only allowed to add attributes, never to
    take them away.
    '''
    class NonMonotonicChange(Exception):
        msg = "Stage <{}> cleared {} voxel attribute(s)."
        def __init__(self, stage, count):
            self.stage = stage
            self.count = count
        def __str__(self):
            return self.msg.format(self.stage, self.count)

    @classmethod
    def random(cls, n, p, random_state=None, **kwargs):
        return cls(build(n, p, random_state), **kwargs)

    def __init__(self, lattice, entry=None, gravity=False, method='stack',
                 cull=True, strategy='ray'):
        self.lattice = lattice
        self.entry = config.ENTRY_FACE if entry is None else entry
        self.state_history = [lattice.state.copy()]
        self.stages = ['build']
        self.counts = {}

        self.run('flood', algorithms.flood, entry=self.entry, gravity=gravity,
                 method=method)
        if cull:
            self.run('cull', algorithms.cull, strategy=strategy)

    def run(self, stage, func, **kwargs):
        self.counts[stage] = func(self.lattice, **kwargs)
        self.stages.append(stage)
        self.state = self.lattice.state
        logger.debug("%s: %s", stage, self.counts[stage])

    @property
    def state(self):
        return self.state_history[-1].copy()

    @state.setter
    def state(self, entry):
        entry = np.array(entry, dtype=np.uint8)
        cleared = self.state_history[-1] & ~entry
        if np.any(cleared):
            raise self.NonMonotonicChange(self.stages[-1], int(np.unpackbits(cleared).sum()))
        self.state_history.append(entry)

    @property
    def step(self):
        return len(self.state_history)-1

    @property
    def history(self):
        return np.stack(self.state_history)

    @property
    def porosity(self):
        '''
        fraction of the lattice not taken by solid
        '''
        if not self.lattice.size:
            return 0.
        return np.count_nonzero(~self.lattice.solid) / self.lattice.size

    @property
    def saturation(self):
        '''
        fraction of the open space the fluid managed to fill
        '''
        open_space = np.count_nonzero(~self.lattice.solid)
        if not open_space:
            return 0.
        return np.count_nonzero(self.lattice.fluid) / open_space

    @property
    def percolates(self):
        '''
        True when the fluid made it all the way to the opposite face
        '''
        n = self.lattice.order
        if n == 0:
            return False
        exit_layer = n-1 - entry_layer(self.entry, n)
        return bool(self.lattice.fluid[exit_layer].any())

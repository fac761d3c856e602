import logging

import numpy as np
from matplotlib.collections import PolyCollection

from . import config
from . import projection
from .algorithms.culling import target_flags
from .lattice import SOLID

logger = logging.getLogger(__name__)

VIEWS = ('combined', 'solid', 'fluid')


def draw_list(lattice, view, culled=True):
    '''
    Coordinates of the voxels to draw for a view, as an (m, 3) array in
    painter order: bottom layer first, then left to right, back to front, so
    that anything drawn later is never behind anything drawn earlier.

    culled : only voxels flagged visible for the view. False draws every voxel
             of the view's material
    '''
    material, flag = target_flags(view)
    mask = (lattice.state & material).astype(bool)
    if culled:
        mask &= (lattice.state & flag).astype(bool)
    i, j, k = np.nonzero(mask)
    order = np.lexsort((-k, j, -i))
    return np.column_stack([i[order], j[order], k[order]])


def polygons(lattice, view, culled=True, margin=None, angle=None):
    '''
    returns (vertices, colors) ready for a PolyCollection. every voxel adds
    its right, left and top faces, in that order
    '''
    ijk = draw_list(lattice, view, culled)
    if not len(ijk):
        return np.zeros([0, 4, 2]), []

    i, j, k = ijk.T
    top, left, right = projection.faces(i, j, k, lattice.order, margin, angle)
    vertices = np.stack([right, left, top], axis=1).reshape(-1, 4, 2)

    colors = []
    for is_solid in (lattice.state[i, j, k] & SOLID).astype(bool):
        left_color, right_color, top_color = config.COLORS['solid' if is_solid else 'fluid']
        colors.extend([right_color, left_color, top_color])
    return vertices, colors


def render(lattice, views=VIEWS, culled=True, margin=None, angle=None, axes=None):
    '''
    Draws each view side by side, the way the simulation shows its result:
    both materials, then solid alone, then fluid alone.
    '''
    import matplotlib.pyplot as plt

    if axes is None:
        fig, axes = plt.subplots(1, len(views), figsize=(4*len(views), 4), squeeze=False)
        axes = axes[0]
    else:
        fig = axes[0].figure

    for ax, view in zip(axes, views):
        vertices, colors = polygons(lattice, view, culled, margin, angle)
        ax.add_collection(PolyCollection(vertices, facecolors=colors, edgecolors='none'))
        ax.set_facecolor(config.BACKGROUND)
        ax.set_xlim(0, 1)
        ax.set_ylim(0, 1)
        ax.set_aspect('equal')
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(view)
        logger.debug("%s view: %d face(s)", view, len(vertices))
    return fig


def save(lattice, filename, **kwargs):
    import matplotlib.pyplot as plt

    fig = render(lattice, **kwargs)
    fig.savefig(filename, facecolor=config.BACKGROUND)
    plt.close(fig)

import numpy as np

from . import config

r'''
Isometric projection of lattice cells onto the unit square.

Every cube is drawn from its bottom front corner. From there the right face
rises along -j, the left face along +k, and the top face sits one side length
above. Stepping one cell in any direction moves the corner by exactly one
edge, so neighbouring faces meet without gaps or overlaps.

         top
        /\
       /  \
       \  /
   left |\/| right
         \/
        corner
'''


def scale(n, margin=None, angle=None):
    '''
    returns (adj, opp, side): the horizontal and vertical reach of one cube
    edge in the ground plane, and the height of a vertical edge. sized so the
    whole lattice fits inside [margin, 1-margin] on both axes
    '''
    margin = config.MARGIN if margin is None else margin
    angle = config.ANGLE if angle is None else angle
    if n < 1:
        raise ValueError("cannot project a lattice of order {}".format(n))
    if not 0 <= margin < 0.5:
        raise ValueError("margin must be in [0, 0.5), got {}".format(margin))

    room = 1 - 2*margin
    ratio = np.tan(angle)
    # width is 2*n*adj, height is n*(2*opp + side)
    height_per_adj = 2*ratio + 1/np.cos(angle)
    adj = room / (n * max(2, height_per_adj))
    return adj, adj*ratio, adj/np.cos(angle)


def extent(n, margin=None, angle=None):
    '''
    bounding box of the projected lattice as (xmin, xmax, ymin, ymax)
    '''
    adj, opp, side = scale(n, margin, angle)
    width = 2*n*adj
    height = n*(2*opp + side)
    return 0.5 - width/2, 0.5 + width/2, 0.5 - height/2, 0.5 + height/2


def origin(i, j, k, n, margin=None, angle=None):
    '''
    bottom front corner of cell (i, j, k). accepts scalars or arrays
    '''
    adj, opp, side = scale(n, margin, angle)
    _, _, ymin, _ = extent(n, margin, angle)
    i, j, k = (np.asarray(a, dtype=float) for a in (i, j, k))
    x = 0.5 + adj*((n-1-j) - k)
    y = ymin + opp*((n-1-j) + k) + side*(n-1-i)
    return x, y


def faces(i, j, k, n, margin=None, angle=None):
    '''
    Returns the (top, left, right) faces of cell (i, j, k), each as four
    (x, y) vertices. With array input every face gains a leading axis, one
    entry per cell.
    '''
    adj, opp, side = scale(n, margin, angle)
    X, Y = origin(i, j, k, n, margin, angle)

    def quad(*vertices):
        return np.stack([np.stack([x, y], axis=-1) for x, y in vertices], axis=-2)

    right = quad(
        (X, Y),
        (X, Y + side),
        (X + adj, Y + opp + side),
        (X + adj, Y + opp))
    left = quad(
        (X, Y),
        (X, Y + side),
        (X - adj, Y + opp + side),
        (X - adj, Y + opp))
    top = quad(
        (X, Y + side),
        (X + adj, Y + opp + side),
        (X, Y + 2*opp + side),
        (X - adj, Y + opp + side))
    return top, left, right

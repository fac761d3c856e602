from .propagation import flood, reachable
from .culling import cull, ray_scan, region_flood, visible_faces

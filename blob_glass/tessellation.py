# tessellation.py
# Bounded Voronoi cells for the sampled seed points

import math

import numpy as np
from scipy.spatial import QhullError, Voronoi
from shapely.geometry import MultiPoint, Polygon, box


def unique_points(points):
    """Drop repeated coordinates, keeping first-occurrence order."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if len(pts) == 0:
        return pts
    _, first = np.unique(pts, axis=0, return_index=True)
    return pts[np.sort(first)]


def get_boundary_points(pts, width, height):
    """Ring of far-away points so every seed region is finite.

    The ring surrounds the canvas and all seeds, which may sit outside the
    canvas when a blob overlaps an edge.
    """
    xmin = min(0.0, pts[:, 0].min()) if len(pts) else 0.0
    ymin = min(0.0, pts[:, 1].min()) if len(pts) else 0.0
    xmax = max(float(width), pts[:, 0].max()) if len(pts) else float(width)
    ymax = max(float(height), pts[:, 1].max()) if len(pts) else float(height)

    # Every canvas point is within one diagonal of some seed, so a ring two
    # diagonals out never owns part of the canvas
    margin = 2 * math.hypot(xmax - xmin, ymax - ymin)
    left, right = xmin - margin, xmax + margin
    top, bottom = ymin - margin, ymax + margin

    nx = max(10, int(width) // 50)
    ny = max(10, int(height) // 50)

    boundary_points = []
    for x in np.linspace(left, right, num=nx):
        boundary_points.append([x, top])
    for y in np.linspace(top, bottom, num=ny):
        boundary_points.append([right, y])
    for x in np.linspace(right, left, num=nx):
        boundary_points.append([x, bottom])
    for y in np.linspace(bottom, top, num=ny):
        boundary_points.append([left, y])

    # corners show up twice
    return unique_points(boundary_points)


def compute_voronoi(points, width, height):
    """Voronoi diagram of the unique seeds plus the boundary ring.

    Returns ``(vor, chosen)`` where ``chosen`` are the unique interior seeds;
    their regions come first in ``vor.point_region``.
    """
    chosen = unique_points(points)
    all_points = np.vstack([chosen, get_boundary_points(chosen, width, height)])
    try:
        vor = Voronoi(all_points)
    except QhullError:
        # nearly degenerate input, joggle it
        vor = Voronoi(all_points, qhull_options="Qbb Qc Qz QJ")
    return vor, chosen


def compute_cells(points, width, height, debug=False):
    """Cell polygons for ``points`` clipped to ``[0,width] x [0,height]``.

    One polygon per unique seed whose cell intersects the canvas, each a list
    of ``(x, y)`` tuples without the closing point.
    """
    if len(points) == 0:
        return []

    vor, chosen = compute_voronoi(points, width, height)
    extent = box(0, 0, width, height)

    if debug:
        debug_counts = {
            "finite": 0,
            "empty_region": 0,
            "infinite": 0,
            "clipped_away": 0,
            "total_points": len(points),
            "unique_points": len(chosen),
        }

    polygons = []
    for i in range(len(chosen)):
        region = vor.regions[vor.point_region[i]]

        if not region:
            if debug:
                debug_counts["empty_region"] += 1
            continue

        # The boundary ring should prevent this
        if -1 in region:
            if debug:
                debug_counts["infinite"] += 1
                print(f"  ⚠️  Point {i}: Unexpected infinite region in bounded Voronoi!")
            continue

        cell = MultiPoint([tuple(vor.vertices[j]) for j in region]).convex_hull
        clipped = cell.intersection(extent)

        if not isinstance(clipped, Polygon) or clipped.is_empty:
            if debug:
                debug_counts["clipped_away"] += 1
            continue

        polygons.append([(float(x), float(y)) for x, y in clipped.exterior.coords[:-1]])
        if debug:
            debug_counts["finite"] += 1

    if debug:
        print(f"\n📊 TESSELLATION SUMMARY:")
        print(f"   Seed points: {debug_counts['total_points']} ({debug_counts['unique_points']} unique)")
        print(f"   ✅ Cells: {debug_counts['finite']}")
        print(
            f"   ❌ Skipped: {debug_counts['empty_region']} empty + {debug_counts['infinite']} infinite"
            f" + {debug_counts['clipped_away']} outside canvas"
        )

    return polygons

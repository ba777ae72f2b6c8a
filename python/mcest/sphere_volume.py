'''
mcest.sphere_volume
===================

Monte Carlo estimate of the volume covered by a set of spheres, and of the
volume where they overlap, by rejection sampling inside their bounding box.
'''

import time

import numpy as np

from .geometry import to_array, \
                      bounding_box, \
                      containment_count
from .sampler import UniformSampler, \
                     DEFAULT_BATCH_SIZE, \
                     check_num_samples, \
                     iter_batches




def binomial_error(volume, hits, n):
    '''
    Shot noise of a rejection-sampling volume estimate.

    Parameters
    ==========

    volume : float
        Volume of the enclosing region that was sampled.

    hits : int
        Number of accepted samples.

    n : int
        Total number of samples.

    Returns
    =======

    error : float
        volume * sqrt(p*(1 - p)/n), with p = hits/n the acceptance fraction.
    '''

    p = hits/n

    q = (n - hits)/n

    return volume*np.sqrt(p*q/n)




def estimate_volumes(spheres,
                     n,
                     overlap_threshold=2,
                     seed=None,
                     batch_size=DEFAULT_BATCH_SIZE,
                     return_errors=False,
                     verbose=0):
    """
    Estimate the volume of the union of a set of spheres and the volume of
    the region inside at least `overlap_threshold` of them.

    Points are drawn uniformly inside the bounding box of the spheres, and
    each point is classified by how many spheres contain it.  The fraction of
    points inside at least one sphere (or at least `overlap_threshold`
    spheres) times the box volume is the estimate.


    Parameters
    ==========

    spheres : astropy.table.Table, sequence of Sphere, or array_like of shape (N, 4)
        The spheres.  See `mcest.geometry.to_array`.

    n : int
        Number of sample points, at least 1.

    overlap_threshold : int
        Minimum number of spheres a point must be inside to count towards the
        overlap volume.  2 gives the pairwise-or-higher overlap; the number of
        spheres gives the intersection of all of them.

    seed : int, optional
        Seed for the uniform sampler.  Defaults to a time-derived value.

    batch_size : int
        Number of points drawn and classified per batch.

    return_errors : bool
        If True, also return the shot noise of both estimates.

    verbose : int
        Values greater than zero print timing output; 2 or more also prints
        per-batch progress.


    Returns
    =======

    hit_volume : float
        Volume inside at least one sphere.

    hit_error : float
        Only if `return_errors` is True.

    overlap_volume : float
        Volume inside at least `overlap_threshold` spheres.

    overlap_error : float
        Only if `return_errors` is True.


    Raises
    ======

    ValueError
        If n is not a positive integer, the threshold is below 1, the sphere
        set is empty, or a radius is negative.
    """

    n = check_num_samples(n)

    if overlap_threshold < 1:

        raise ValueError("Overlap threshold must be at least 1, got {}".format(overlap_threshold))

    centers, radii = to_array(spheres)

    box = bounding_box(np.column_stack([centers, radii]))

    box_volume = box.volume

    sampler = UniformSampler(seed)

    if verbose > 0:

        print("Sampling", n, "points in a bounding box of volume", box_volume,
              "(seed {})".format(sampler.seed), flush=True)

    start_time = time.time()

    hits = 0

    overlap_hits = 0

    for m in iter_batches(n, batch_size):

        points = sampler.draw(box.min, box.max, (m, 3))

        counts = containment_count(points, centers, radii)

        hits += int(np.count_nonzero(counts >= 1))

        overlap_hits += int(np.count_nonzero(counts >= overlap_threshold))

        if verbose > 1:

            print("  batch of", m, "points:", hits, "hits,", overlap_hits, "overlapping hits", flush=True)

    hit_volume = box_volume*hits/n

    overlap_volume = box_volume*overlap_hits/n

    if verbose > 0:

        print("Time to sample sphere volumes:", time.time() - start_time, flush=True)

    if return_errors:

        return hit_volume, \
               binomial_error(box_volume, hits, n), \
               overlap_volume, \
               binomial_error(box_volume, overlap_hits, n)

    return hit_volume, overlap_volume

################################################################################
# MCEST - Monte Carlo sphere volumes
#
# This is a working example script for estimating the volume of a set of
# spheres, and of the regions where they overlap, from a sphere file.
################################################################################




################################################################################
# IMPORT MODULES
#
# mcest can be installed as a normal python package via 'pip install .' (or
# 'pip install -e .' to run off this repository).
#-------------------------------------------------------------------------------
from mcest.preprocessing import read_spheres_file
from mcest.geometry import bounding_box, theoretical_volume
from mcest.sphere_volume import estimate_volumes
################################################################################




################################################################################
# USER INPUTS
#-------------------------------------------------------------------------------
# Input file name
# File format: x y z r, one sphere per line
spheres_filename = 'spheres.txt'

# Number of random points
num_samples = 1000000

# Fix the seed to make the run reproducible; None gives a time-derived seed
seed = 2014

# Overlap thresholds to report; 2 is pairwise overlap
thresholds = [2, 3]
################################################################################




################################################################################
# READ SPHERES
#-------------------------------------------------------------------------------
spheres = read_spheres_file(spheres_filename, verbose=1)

box = bounding_box(spheres)

print('Bounding box:', box.min.to_string(), 'to', box.max.to_string())
print('Theoretical total volume:', theoretical_volume(spheres))
################################################################################




################################################################################
# ESTIMATE VOLUMES
#
# The same seed gives the same sample points for every threshold, so the union
# volume is identical across the runs.
#-------------------------------------------------------------------------------
for k in thresholds:

    hit_volume, hit_error, overlap_volume, overlap_error = \
        estimate_volumes(spheres, num_samples, overlap_threshold=k, seed=seed,
                         return_errors=True)

    print('Union volume: {:.4f} +/- {:.4f}'.format(hit_volume, hit_error))
    print('Volume inside at least {} spheres: {:.4f} +/- {:.4f}'.format(k, overlap_volume, overlap_error))
################################################################################

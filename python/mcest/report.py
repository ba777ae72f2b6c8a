'''
mcest.report
============

Plain-text reports for the command line programs.
'''

import time




class Timer():
    """
    Wall-clock timer, used as a context manager around an estimation run.
    """

    def __enter__(self):

        self.start = time.time()

        self.end = None

        return self


    def __exit__(self, *exc_info):

        self.end = time.time()

        return False


    @property
    def elapsed(self):

        end = self.end if self.end is not None else time.time()

        return end - self.start




def format_elapsed(seconds):
    '''Format a duration as "S secs MS msecs".'''

    secs = int(seconds)

    msecs = int(round((seconds - secs)*1000))

    if msecs == 1000:

        secs += 1

        msecs = 0

    return "{} secs {} msecs".format(secs, msecs)




def title(text):

    return text + "\n" + "="*len(text) + "\n"




def pi_report(n, pi, error, seed, elapsed):

    lines = [title("Monte Carlo for computing the value of PI"),
             "Number of generated random points: {}".format(n),
             "Seed: {}".format(seed),
             "PI = {:.10f} +/- {:.2g}".format(pi, error),
             "",
             "Execution time: {}".format(format_elapsed(elapsed))]

    return "\n".join(lines) + "\n"




def integration_report(n, label, a, b, estimate, error, seed, elapsed):

    lines = [title("Monte Carlo Integration"),
             "Number of generated random points: {}".format(n),
             "Function: {}".format(label),
             "Seed: {}".format(seed),
             "integrate({}, {:g}, {:g}) = {:.10g} +/- {:.2g}".format(label, a, b, estimate, error),
             "",
             "Execution time: {}".format(format_elapsed(elapsed))]

    return "\n".join(lines) + "\n"




def spheres_report(spheres,
                   box,
                   theoretical,
                   n,
                   overlap_threshold,
                   hit_volume,
                   hit_error,
                   overlap_volume,
                   overlap_error,
                   seed,
                   elapsed):
    '''
    Parameters
    ==========

    spheres : list of mcest.geometry.Sphere

    box : mcest.geometry.BoundingBox

    theoretical : float
        Sum of the sphere volumes, without overlap correction.

    remaining parameters as returned by the estimator and its timer.
    '''

    lines = [title("Monte Carlo for computing volume of a set of spheres"),
             "Set of spheres"]

    lines.extend("- " + sphere.to_string() for sphere in spheres)

    lines.extend(["",
                  "Bounding parallelepiped:",
                  "  Minimum point: " + box.min.to_string(),
                  "  Maximum point: " + box.max.to_string(),
                  "  Dimensions: " + " x ".join("{:g}".format(side) for side in box.dimensions),
                  "",
                  "Total volume of all spheres (Theoretical): {:g}".format(theoretical),
                  "",
                  "Number of generated random points: {}".format(n),
                  "Seed: {}".format(seed),
                  "",
                  "Volume of all spheres = {:g} +/- {:.2g}".format(hit_volume, hit_error),
                  "Overlapping volume (inside at least {} spheres) = {:g} +/- {:.2g}".format(overlap_threshold,
                                                                                              overlap_volume,
                                                                                              overlap_error),
                  "",
                  "Execution time: {}".format(format_elapsed(elapsed))])

    return "\n".join(lines) + "\n"

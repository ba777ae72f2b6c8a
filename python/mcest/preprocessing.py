'''
mcest.preprocessing
===================

Reading sphere sets from text and FITS files into astropy tables.
'''

import os

import numpy as np
from astropy.table import Table



SPHERE_COLUMNS = ['x', 'y', 'z', 'r']




def parse_sphere_record(line):
    '''
    Parse one line of a sphere file.

    Parameters
    ==========

    line : str
        Whitespace-separated x y z r.

    Returns
    =======

    tuple of 4 floats, or None if the line is not a valid sphere record.
    '''

    fields = line.split()

    if len(fields) != 4:

        return None

    try:

        values = tuple(float(field) for field in fields)

    except ValueError:

        return None

    if not np.all(np.isfinite(values)) or values[3] < 0:

        return None

    return values




def read_spheres_file(input_filepath, verbose=0):
    '''
    Load a set of spheres from a text or FITS file.

    Text files hold one sphere per line as whitespace-separated
    "x y z r".  Blank lines and lines starting with '#' are ignored.  Any
    other line which is not exactly four finite numbers with a non-negative
    radius is skipped, so a truncated last line never becomes a sphere.

    Files ending in .fits or .fit (in any case) are read with astropy; they
    need x, y, z and r (or radius) columns, in any case.  Rows with a
    non-finite value or a negative radius are skipped, as for text records.


    Parameters
    ==========

    input_filepath : str
        Path to the sphere file.

    verbose : int
        Values greater than zero print each skipped record.


    Returns
    =======

    astropy.table.Table
        Columns x, y, z, r in file order.


    Raises
    ======

    OSError
        If the file cannot be opened.
    '''

    if input_filepath.lower().endswith(('.fits', '.fit')):

        return _read_spheres_fits(input_filepath, verbose=verbose)

    rows = []

    n_skipped = 0

    # Undecodable bytes become U+FFFD, so such a line fails to parse and is skipped
    with open(input_filepath, 'r', errors='replace') as infile:

        for line_number, line in enumerate(infile, start=1):

            stripped = line.strip()

            if not stripped or stripped.startswith('#'):

                continue

            record = parse_sphere_record(stripped)

            if record is None:

                n_skipped += 1

                if verbose > 0:

                    print("Skipping malformed sphere record on line", line_number, ":", stripped, flush=True)

                continue

            rows.append(record)

    if verbose > 0:

        print("Read", len(rows), "spheres from", input_filepath, "(skipped", n_skipped, "records)",
              flush=True)

    return spheres_table(rows)




def _read_spheres_fits(input_filepath, verbose=0):

    if not os.path.isfile(input_filepath):

        raise FileNotFoundError("No such sphere file: {}".format(input_filepath))

    data_table = Table.read(input_filepath)

    for name in data_table.colnames:

        data_table[name].name = name.lower()

    if 'r' not in data_table.colnames and 'radius' in data_table.colnames:

        data_table['radius'].name = 'r'

    missing = [name for name in SPHERE_COLUMNS if name not in data_table.colnames]

    if missing:

        raise ValueError("Sphere table {} is missing columns {}".format(input_filepath, missing))

    table = data_table[SPHERE_COLUMNS]

    for name in SPHERE_COLUMNS:

        table[name] = np.asarray(table[name], dtype=np.float64)

    # Same rule as a text record: finite values and a non-negative radius
    array = np.array([table[name] for name in SPHERE_COLUMNS]).T

    valid = np.all(np.isfinite(array), axis=1) & (array[:,3] >= 0)

    if verbose > 0:

        print("Read", np.count_nonzero(valid), "spheres from", input_filepath,
              "(skipped", np.count_nonzero(~valid), "records)", flush=True)

    return table[valid]




def spheres_table(rows):
    '''Build a sphere table (x, y, z, r float columns) from (x, y, z, r) rows.'''

    array = np.array(rows, dtype=np.float64).reshape(-1, 4)

    return Table([array[:,i] for i in range(4)], names=SPHERE_COLUMNS)

r"""Global options.

Attributes
----------
digits : `int`
    Number of digits displayed by status updates and string representations. The default number of digits is ``7``.
    The number of digits can be changed to, for example, ``2``, with ``pyleb.options.digits = 2``.
verbose : `bool`
    Whether to output status updates. By default, verbosity is turned on. Verbosity can be turned off with
    ``pyleb.options.verbose = False``.
verbose_tracebacks : `bool`
    Whether to include full tracebacks in error messages. By default, full tracebacks are turned off. These can be
    useful when attempting to find the source of an error message. Tracebacks can be turned on with
    ``pyleb.options.verbose_tracebacks = True``.
verbose_output : `callable`
    Function used to output status updates. The default function is simply ``print``. The function can be changed, for
    example, to include an indicator that statuses are from this package, with
    ``pyleb.options.verbose_output = lambda x: print(f"pyleb: {x}")``.
flush_output : `bool`
    Whether to call ``sys.stdout.flush()`` after outputting a status update. By default, output is not flushed to
    standard output. To force standard output flushes after every status update, set
    ``pyleb.options.flush_output = True``.
dtype : `dtype`
    The data type of the fields built by :func:`build_grid`, which is by default ``numpy.float64``. Orbits are always
    expanded in double precision because the published generators have 16 significant digits, so a wider type such as
    ``numpy.longdouble`` only changes the storage of the final nodes and weights.
weights_tol : `float`
    Tolerance for detecting integration weights that do not sum to the configured scale, which is by default ``1e-10``.
    Warnings can be disabled by setting this to ``numpy.inf``.
radicand_tol : `float`
    Tolerance for negative radicands encountered when deriving the dependent coordinate of an orbit, which is by
    default ``1e-14``. Radicands in ``[-radicand_tol, 0)`` are rounding error and are treated as zero. Anything more
    negative means that the generator does not lie on the unit sphere, and an error is raised.

"""

import numpy as _np


digits = 7
verbose = True
verbose_tracebacks = False
verbose_output = print
flush_output = False
dtype = _np.float64
weights_tol = 1e-10
radicand_tol = 1e-14

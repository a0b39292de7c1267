"""Fixtures used by tests."""

import os
from typing import Any, Iterator, List, cast

import numpy as np
import pytest

from pyleb import options


@pytest.fixture(scope='session', autouse=True)
def configure() -> Iterator[None]:
    """Configure NumPy so that it raises all warnings other than underflow as exceptions. Underflow is expected when
    raising small coordinates to high powers. Next, turn off status updates. Finally, if a DTYPE environment variable is
    set in this testing environment that is different from the default data type, use it for all built grids.
    """

    # configure NumPy so that it raises all warnings as exceptions
    old_error = np.seterr(all='raise', under='ignore')

    # silence status updates
    old_verbose = options.verbose
    options.verbose = False

    # use any different data type for all built grids
    old_dtype = options.dtype
    dtype_string = os.environ.get('DTYPE')
    if dtype_string:
        options.dtype = cast(Any, np.dtype(dtype_string))
        if np.finfo(options.dtype).dtype == old_dtype:
            pytest.skip(f"The {dtype_string} data type is the same as the default one in this environment.")

    # run tests before reverting all changes
    yield
    options.dtype = old_dtype
    options.verbose = old_verbose
    np.seterr(**old_error)


@pytest.fixture
def messages(monkeypatch: Any) -> List[str]:
    """Collect status updates instead of printing them."""
    collected: List[str] = []
    monkeypatch.setattr(options, 'verbose', True)
    monkeypatch.setattr(options, 'verbose_output', collected.append)
    return collected

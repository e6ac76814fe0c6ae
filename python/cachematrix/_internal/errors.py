from __future__ import annotations

import numpy as np

# The inversion routine's own error type. cache_solve never wraps or
# translates it, so this is the exact class callers see.
InversionFailure = np.linalg.LinAlgError

# Copyright 2025 Robert B. Lowrie
# This software is covered by the MIT License.
# Please see the provided LICENSE file for more details.
'''
Data types for type checking.
'''
import numpy as np
from typing import Sequence, Union

ArrayLike = Union[Sequence[float], np.ndarray]
Limit = Union[None, bool, float]

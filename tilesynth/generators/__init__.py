"""Map generators keyed by algorithm name.

``bsp`` builds rooms and corridors, ``ca`` grows caves. Each lookup returns a
fresh instance so no state is shared between callers.
"""

from __future__ import annotations

import random
from typing import Dict, Optional, Type

from ..errors import UnknownAlgorithmError
from .base import BaseGenerator
from .bsp import BSPGenerator
from .cave import CaveGenerator

GENERATORS: Dict[str, Type[BaseGenerator]] = {
    BSPGenerator.name: BSPGenerator,
    CaveGenerator.name: CaveGenerator,
}


def get_generator(name: str, rng: Optional[random.Random] = None, **kwargs) -> BaseGenerator:
    try:
        cls = GENERATORS[name]
    except KeyError:
        raise UnknownAlgorithmError("generator", name, GENERATORS) from None
    return cls(rng=rng, **kwargs)


__all__ = ["BaseGenerator", "BSPGenerator", "CaveGenerator", "GENERATORS", "get_generator"]

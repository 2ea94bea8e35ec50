"""VectorOps facade binding the vector function set to one configuration."""

from dataclasses import dataclass, field

from . import vector
from .config import VectorMathConfig
from .primitives import FloatVector


@dataclass(frozen=True)
class VectorOps:
    """
    Stateless vector operations with the normalization mode fixed up front.

    Every attribute other than `normalize` is the plain function from
    `voxmath.core.vector`; `normalize` always uses `config.normalize_mode`.
    """

    config: VectorMathConfig = field(default_factory=VectorMathConfig)

    dot = staticmethod(vector.dot)
    length_squared = staticmethod(vector.length_squared)
    length = staticmethod(vector.length)
    cross = staticmethod(vector.cross)
    map_components = staticmethod(vector.map_components)

    sin = staticmethod(vector.sin)
    cos = staticmethod(vector.cos)
    tan = staticmethod(vector.tan)
    asin = staticmethod(vector.asin)
    acos = staticmethod(vector.acos)
    atan = staticmethod(vector.atan)
    abs = staticmethod(vector.abs)
    floor = staticmethod(vector.floor)
    ceil = staticmethod(vector.ceil)
    trunc = staticmethod(vector.trunc)
    round = staticmethod(vector.round)
    fract = staticmethod(vector.fract)
    sign = staticmethod(vector.sign)
    radians = staticmethod(vector.radians)
    degrees = staticmethod(vector.degrees)
    sqrt = staticmethod(vector.sqrt)
    exp = staticmethod(vector.exp)
    exp2 = staticmethod(vector.exp2)
    log = staticmethod(vector.log)
    log2 = staticmethod(vector.log2)

    mod = staticmethod(vector.mod)
    min = staticmethod(vector.min)
    max = staticmethod(vector.max)
    clamp = staticmethod(vector.clamp)

    @classmethod
    def from_env(cls) -> "VectorOps":
        """Operations configured from the process environment."""
        return cls(config=VectorMathConfig.from_env())

    def normalize(self, v: FloatVector) -> FloatVector:
        """Normalize `v` with the configured algorithm."""
        return vector.normalize(v, mode=self.config.normalize_mode)

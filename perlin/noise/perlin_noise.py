"""
Classic gradient (Perlin) noise in 1 to 4 dimensions.

Based on Ken Perlin's improved noise: quintic fade, fixed permutation table,
and bit-masked gradient selection. Output is deterministic for a given
coordinate and continuous across lattice cells.
"""
from typing import List
from typing import NamedTuple
from typing import Sequence

import jax
from jax import Array
from jax import numpy as jnp

from perlin.settings import Float
from perlin.settings import IntLowDim

P_BASE = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140,
    36, 103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234,
    75, 0, 26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33, 88, 237,
    149, 56, 87, 174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48,
    27, 166, 77, 146, 158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105,
    92, 41, 55, 46, 245, 40, 244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73,
    209, 76, 132, 187, 208, 89, 18, 169, 200, 196, 135, 130, 116, 188, 159, 86,
    164, 100, 109, 198, 173, 186, 3, 64, 52, 217, 226, 250, 124, 123, 5, 202, 38,
    147, 118, 126, 255, 82, 85, 212, 207, 206, 59, 227, 47, 16, 58, 17, 182, 189,
    28, 42, 223, 183, 170, 213, 119, 248, 152, 2, 44, 154, 163, 70, 221, 153,
    101, 155, 167, 43, 172, 9, 129, 22, 39, 253, 19, 98, 108, 110, 79, 113, 224,
    232, 178, 185, 112, 104, 218, 246, 97, 228, 251, 34, 242, 193, 238, 210, 144,
    12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107, 49, 192, 214,
    31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4, 150,
    254, 138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66,
    215, 61, 156, 180,
)

# Doubled so that `index + 1` never needs wrapping
PERM = jnp.array(P_BASE + P_BASE, dtype=IntLowDim)


class PerlinNoise(NamedTuple):
    P_BASE = P_BASE
    PERM = PERM

    @staticmethod
    def fade(t):
        "6t^5 - 15t^4 + 10t^3"
        return t * t * t * (t * (t * 6 - 15) + 10)

    @staticmethod
    def lerp(t, a, b):
        "Linear interpolation from a (t=0) to b (t=1)."
        return a + t * (b - a)

    @staticmethod
    def grad1(hash: Array, x: Array) -> Array:
        return jnp.where((hash & 1) != 0, -x, x)

    @staticmethod
    def grad2(hash: Array, x: Array, y: Array) -> Array:
        h = hash & 3
        u = jnp.where(h < 2, x, -x)
        v = jnp.where((h == 0) | (h == 2), y, -y)
        return u + v

    @staticmethod
    def grad3(hash: Array, x: Array, y: Array, z: Array) -> Array:
        """
        Dot product of (x, y, z) with one of the 12 cube edge directions.

        The low 4 bits of the hash pick the two participating axes and their
        signs. Slots 12 to 15 repeat four of the directions so that the
        selection is a plain mask.
        """
        h = hash & 15
        u = jnp.where(h < 8, x, y)
        v = jnp.where(h < 4, y, jnp.where((h == 12) | (h == 14), x, z))
        return jnp.where((h & 1) != 0, -u, u) + jnp.where((h & 2) != 0, -v, v)

    @staticmethod
    def grad4(hash: Array, x: Array, y: Array, z: Array, t: Array) -> Array:
        """
        Dot product of (x, y, z, t) with one of 32 directions of the 4-cube.

        The low 5 bits select three of the four axes (one axis is dropped
        depending on the range the hash falls in) and bits 0, 1 and 2 give
        their signs.
        """
        h = hash & 31
        u = jnp.where(h < 24, x, y)
        v = jnp.where(h < 16, y, z)
        w = jnp.where(h < 8, z, t)
        return (
            jnp.where((h & 1) != 0, -u, u)
            + jnp.where((h & 2) != 0, -v, v)
            + jnp.where((h & 4) != 0, -w, w)
        )

    @staticmethod
    def lattice(v: Array):
        """
        Splits a coordinate into its 8 bit lattice index and its offset in the cell.

        Args:
            v: coordinate along one axis
        Returns:
            - index: floor(v) mod 256, 0 for NaN and +/-Inf
            - frac: v - floor(v), NaN for non-finite input
        """
        v = jnp.asarray(v, dtype=Float)
        fv = jnp.floor(v)
        # mod in floating point is exact for any finite integer value
        index = jnp.where(jnp.isfinite(fv), jnp.mod(fv, 256.0), 0.0).astype(IntLowDim)
        return index, v - fv

    @classmethod
    def hash_corners(cls, index: Sequence[Array]) -> List[Array]:
        """
        Hashes every corner of the lattice cell.

        The lookups are chained axis by axis (A = P[X] + Y, AA = P[A] + Z, ...)
        so that prefixes shared by several corners are looked up once.
        Corner c takes `index[k] + ((c >> k) & 1)` on axis k.
        """
        offsets = [index[0], index[0] + 1]
        for idx in index[1:]:
            base = [cls.PERM[o] + idx for o in offsets]
            offsets = base + [b + 1 for b in base]
        return [cls.PERM[o] for o in offsets]

    @classmethod
    def interpolate(cls, corners: Sequence[Array], weights: Sequence[Array]) -> Array:
        """
        N-linear interpolation of 2^N corner values.

        Axis 0 is interpolated first, pairing corners that differ only in the
        lowest bit of their position in `corners`.
        """
        values = list(corners)
        for w in weights:
            values = [cls.lerp(w, a, b) for a, b in zip(values[0::2], values[1::2])]
        return values[0]

    @classmethod
    def _evaluate(cls, grad, hashes: Sequence[Array], frac: Sequence[Array]) -> Array:
        contributions = [
            grad(h, *[f - ((c >> k) & 1) for k, f in enumerate(frac)])
            for c, h in enumerate(hashes)
        ]
        return cls.interpolate(contributions, [cls.fade(f) for f in frac])

    @classmethod
    def noise1(cls, x: Array) -> Array:
        X, x = cls.lattice(x)
        hashes = [cls.PERM[cls.PERM[X]], cls.PERM[cls.PERM[X + 1]]]
        return cls._evaluate(cls.grad1, hashes, [x])

    @classmethod
    def noise2(cls, x: Array, y: Array) -> Array:
        index, frac = zip(*[cls.lattice(c) for c in (x, y)])
        return cls._evaluate(cls.grad2, cls.hash_corners(index), frac)

    @classmethod
    def noise3(cls, x: Array, y: Array, z: Array) -> Array:
        index, frac = zip(*[cls.lattice(c) for c in (x, y, z)])
        return cls._evaluate(cls.grad3, cls.hash_corners(index), frac)

    @classmethod
    def noise4(cls, x: Array, y: Array, z: Array, t: Array) -> Array:
        index, frac = zip(*[cls.lattice(c) for c in (x, y, z, t)])
        return cls._evaluate(cls.grad4, cls.hash_corners(index), frac)


fade = PerlinNoise.fade
lerp = PerlinNoise.lerp

noise1d = jax.jit(PerlinNoise.noise1)
noise2d = jax.jit(PerlinNoise.noise2)
noise3d = jax.jit(PerlinNoise.noise3)
noise4d = jax.jit(PerlinNoise.noise4)

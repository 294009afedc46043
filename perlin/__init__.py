from perlin import settings  # noqa: F401
from perlin.noise.perlin_noise import PERM  # noqa: F401
from perlin.noise.perlin_noise import PerlinNoise  # noqa: F401
from perlin.noise.perlin_noise import fade  # noqa: F401
from perlin.noise.perlin_noise import lerp  # noqa: F401
from perlin.noise.perlin_noise import noise1d  # noqa: F401
from perlin.noise.perlin_noise import noise2d  # noqa: F401
from perlin.noise.perlin_noise import noise3d  # noqa: F401
from perlin.noise.perlin_noise import noise4d  # noqa: F401

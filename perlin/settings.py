import logging

import jax
import jax.numpy as jnp

logger = logging.getLogger("perlin.settings")

# The noise field is pinned to float64 reference values
jax.config.update("jax_enable_x64", True)
logger.debug("JAX 64-bit floating point enabled")

Float = jnp.float64
IntLowDim = jnp.int32

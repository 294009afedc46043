from setuptools import find_packages, setup

# Specifying all dependencies, including direct and indirect, for clarity
requires = [
    "jax",
    "jaxlib",
    "numpy",
]

test_requires = [
    "chex",
    "pytest",
]

setup(
    name="perlin",
    version="0.0.1",
    keywords="noise, perlin, gradient noise, procedural, jax",
    description="Classic 1D-4D Perlin gradient noise built with JAX",
    packages=find_packages(include=["perlin", "perlin.*"]),
    install_requires=requires,
    extras_require={"test": test_requires},
    python_requires=">=3.10",
)

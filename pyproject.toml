[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vortexpc"
version = "0.1.0"
description = "Vortex-style polynomial commitment over the KoalaBear field with Reed-Solomon encoding, Poseidon2 hashing and Merkle trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "polynomial commitment",
    "vortex",
    "reed-solomon",
    "merkle tree",
    "poseidon2",
    "koalabear",
    "finite field",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["vortexpc"]

[tool.hatch.build.targets.sdist]
include = ["vortexpc", "tests"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

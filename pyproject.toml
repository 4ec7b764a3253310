[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnpair"
version = "0.1.0"
description = "Pure-Python BN254 (BN256) base field and its Fq2/Fq6/Fq12 extension tower"
requires-python = ">=3.10"
dependencies = []
keywords = ["bn254", "bn256", "finite-field", "extension-field", "pairing", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bnpair"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

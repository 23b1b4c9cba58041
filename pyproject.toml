[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hashkit"
version = "0.1.0"
description = "Pure-Python implementations of MD2, MD4, MD5, BLAKE2, GOST R 34.11-94 and KangarooTwelve"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "digest", "md2", "md4", "md5", "blake2", "gost94", "kangarootwelve", "k12", "mac", "xof"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hashkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "odu-daps"
version = "0.1.0"
description = "A small O-DU runtime for Dual Active Protocol Stack (DAPS) handover: F1-U/F1-C intake over UDP, per-leg RLC buffering and a TTI-driven MAC scheduler"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "o-ran",
    "o-du",
    "daps",
    "handover",
    "gtp-u",
    "f1",
    "rlc",
    "mac",
    "5g",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Telephony",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
odu-daps = "odu_daps.app:main"

[tool.hatch.build.targets.wheel]
packages = ["odu_daps"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

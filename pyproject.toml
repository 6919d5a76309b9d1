[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rftclient"
version = "0.1.0"
description = "Reliable file transfer client using a Go-Back-N window over UDP datagrams"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "datagram", "file transfer", "go-back-n", "reliable transport", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rft-client = "rftclient.client:main"

[tool.hatch.build.targets.wheel]
packages = ["rftclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

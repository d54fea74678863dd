[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saltbox"
version = "0.1.0"
description = "Pure Python cryptographic primitives: SipHash-2-4, Poly1305, SHA-512, X25519 and wiped byte buffers with tracked protection modes"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "poly1305", "siphash", "sha512", "curve25519", "x25519"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saltbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sdfileserver"
version = "0.1.0"
description = "Wire format, status panel model and mountable storage for a small chunked TCP file server."
requires-python = ">=3.10"
dependencies = []
keywords = ["tcp", "file-server", "file-transfer", "protocol", "storage", "status-display"]
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
    "Topic :: Internet :: File Transfer Protocol (FTP)",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sdfileserver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fspathkit"
version = "0.1.0"
description = "Lexical path decomposition, file status queries and small filesystem tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "path", "decomposition", "file status", "directory listing"]
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
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fspath-table = "fspathkit.pathtable:main"
fspath-info = "fspathkit.pathinfo:main"
fspath-stems = "fspathkit.pathinfo:stems_main"
fspath-demo = "fspathkit.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["fspathkit"]

[tool.hatch.build.targets.sdist]
include = ["fspathkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

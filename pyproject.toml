[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vitapkg"
version = "0.1.0"
description = "Helpers for PS Vita package handling: zRIF licence decoding, raw inflate, SHA-256/HMAC, text conversion and list-view logic"
requires-python = ">=3.10"
keywords = ["vita", "pkg", "zrif", "inflate", "deflate", "sha256", "hmac"]
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
    "Topic :: System :: Archiving :: Packaging",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["vitapkg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"

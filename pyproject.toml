[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sahnekit"
version = "0.1.0"
description = "Small readers and writers for common file formats, plus simulated block devices and filesystem bookkeeping"
requires-python = ">=3.11"
dependencies = [
    "pyyaml",
]
keywords = [
    "filesystem",
    "block-device",
    "superblock",
    "free-space",
    "wav",
    "stl",
    "svg",
    "xml",
    "yaml",
    "toml",
    "file-formats",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: File Formats",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sahnekit-typescript = "sahnekit.typescript:main"
sahnekit-svg = "sahnekit.svg:main"
sahnekit-wav = "sahnekit.wav:main"
sahnekit-drivelog = "sahnekit.drivelog:main"

[tool.hatch.build.targets.wheel]
packages = ["sahnekit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true

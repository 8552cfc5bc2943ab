[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "winsysoverlay"
version = "1.0.0"
description = "A small always-on-top overlay showing CPU, memory, disk, network, process and uptime figures."
requires-python = ">=3.10"
keywords = ["overlay", "system monitor", "cpu", "memory", "network", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil>=5.9",
    "platformdirs>=3.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
winsys-overlay = "winsysoverlay.app:main"

[tool.hatch.build.targets.wheel]
packages = ["winsysoverlay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dashjumper"
version = "0.1.0"
description = "An endless side-scrolling runner: jump over and duck under incoming obstacles."
requires-python = ">=3.10"
keywords = ["game", "arcade", "runner", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dashjumper = "dashjumper.game:main"

[tool.hatch.build.targets.wheel]
packages = ["dashjumper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

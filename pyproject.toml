[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spaceinvaders"
version = "0.1.0"
description = "A small Space Invaders arcade game built on pygame"
requires-python = ">=3.10"
keywords = ["game", "arcade", "space invaders", "pygame", "shooter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
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
spaceinvaders = "spaceinvaders.main:main"

[tool.hatch.build.targets.wheel]
packages = ["spaceinvaders"]

[tool.pytest.ini_options]
addopts = "-ra"

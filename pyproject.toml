[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gradientgen"
version = "0.1.0"
description = "Render colour gradients and noise textures from shape, function and noise parameterisations."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["gradient", "image", "perlin", "noise", "colour", "texture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gradientgen = "gradientgen.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gradientgen"]

[tool.hatch.build.targets.sdist]
include = [
    "gradientgen",
    "tests",
]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

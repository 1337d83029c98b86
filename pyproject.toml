[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "raygames"
version = "0.1.0"
description = "Small 2D games and graphics demos on pygame: Tetris, a space shooter, a walking-character brawler and a set of sketches."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["games", "tetris", "space-shooter", "pygame", "2d", "demos", "animation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
raygames-tetris = "raygames.tetris.app:main"
raygames-shooter = "raygames.shooter.app:main"
raygames-walker = "raygames.walker.app:main"
raygames-walker-solo = "raygames.walker.solo:main"
raygames-starfield = "raygames.demos.starfield:main"
raygames-collision-rects = "raygames.demos.collision:rectangles_main"
raygames-collision-circles = "raygames.demos.collision:circles_main"
raygames-bullet = "raygames.demos.bullet:main"
raygames-button = "raygames.demos.button:main"
raygames-link-button = "raygames.demos.button:link_main"
raygames-chaser = "raygames.demos.chaser:main"
raygames-chaser-keys = "raygames.demos.chaser:keys_main"
raygames-walk = "raygames.demos.walk:main"
raygames-gallery = "raygames.demos.gallery:main"

[tool.hatch.build.targets.wheel]
packages = ["raygames"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true

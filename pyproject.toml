[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-system algorithms: paging, disk scheduling, CPU and real-time scheduling, memory allocation and deadlock avoidance."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "page replacement",
    "disk scheduling",
    "banker's algorithm",
    "memory allocation",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos-paging = "osalgos.paging:main"
osalgos-disk = "osalgos.disk:main"
osalgos-allocation = "osalgos.allocation:main"
osalgos-banker = "osalgos.banker:main"
osalgos-cpu = "osalgos.cpu:main"
osalgos-realtime = "osalgos.realtime:main"
osalgos-processes = "osalgos.processes:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

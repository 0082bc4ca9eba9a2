[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "agenda-imobiliaria"
version = "0.1.0"
description = "Builds the visit schedule of real-estate appraisers, ordering each one's properties by nearest distance."
requires-python = ">=3.10"
dependencies = []
keywords = ["real estate", "scheduling", "haversine", "appraisal", "agenda"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
agenda-imobiliaria = "agenda_imobiliaria.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["agenda_imobiliaria"]

[tool.pytest.ini_options]
addopts = "-ra"

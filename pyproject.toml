[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "talisman"
version = "0.1.0"
description = "Detectors for secrets in file content (high-entropy base64 and hex text, credit card numbers) and a collector for detection results"
requires-python = ">=3.10"
dependencies = []
keywords = ["secrets", "security", "entropy", "base64", "hex", "credit-card", "luhn", "scanner"]
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
    "Topic :: Security",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["talisman"]

[tool.pytest.ini_options]
addopts = "-ra"

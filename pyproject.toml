[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dhcp4opts"
version = "0.1.0"
description = "Encoding, decoding and human-readable rendering of DHCPv4 options, with zero-touch provisioning helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["dhcp", "dhcpv4", "options", "networking", "ztp", "rfc2132", "rfc3046", "rfc3442"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dhcp4opts"]

[tool.pytest.ini_options]
addopts = "-ra"

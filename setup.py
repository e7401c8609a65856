#!/usr/bin/env python3
"""
Setup script for appletsh for environments that still call setup.py directly.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]
    name = poetry["name"]
    version = poetry["version"]
    description = poetry["description"]
    authors = poetry["authors"]
    license_text = poetry["license"]

    # Get dependencies; optional ones go to their extras
    dependencies = poetry["dependencies"]
    install_requires = []
    optional = {}
    for dep, version_spec in dependencies.items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        else:
            optional[dep] = f"{dep}{version_spec.get('version', '')}"
    extras_require = {
        extra: [optional[dep] for dep in deps if dep in optional]
        for extra, deps in poetry.get("extras", {}).items()
    }

    scripts = [f"{cmd}={target}" for cmd, target in poetry.get("scripts", {}).items()]

    # Get packages
    packages = find_packages(where="src")
    package_dir = {"": "src"}

    setup(
        name=name,
        version=version,
        description=description,
        author=authors[0] if isinstance(authors, list) else authors,
        license=license_text,
        packages=packages,
        package_dir=package_dir,
        install_requires=install_requires,
        extras_require=extras_require,
        entry_points={"console_scripts": scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)

from setuptools import setup, find_packages

setup(
    name="iconlookup",
    version="1.0.0",
    description="Freedesktop icon theme lookup",
    author="Ty",
    license="GPLv3",
    packages=find_packages(include=["iconlookup", "iconlookup.*"]),
    python_requires=">=3.11",
    install_requires=[
        "PyQt6>=6.7.0",
        "typer>=0.12.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "iconlookup=iconlookup.main:main",
        ],
    },
)

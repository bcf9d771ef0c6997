from setuptools import setup, find_packages

# Core dependencies
core_requirements = [
    "cairosvg>=2.5.2",
    "pillow>=9.3.0",
    "numpy>=1.22.0",
    "pandas>=1.5.0",
    "defusedxml>=0.7.1",
    "pyshp>=2.3.0",
]

# Test dependencies
test_requirements = [
    "pytest>=7.0.0",
]

setup(
    name="vecdraw",
    version="0.1.0",
    description="A small 2D vector-graphics drawing library with PNG, SVG, PDF and EPS output",
    packages=find_packages(exclude=("tests", "tests.*")),
    install_requires=core_requirements,
    extras_require={
        "test": test_requirements,
    },
    python_requires=">=3.8",
    entry_points={
        "console_scripts": [
            "vecdraw=vecdraw.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
)

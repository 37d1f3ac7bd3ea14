from setuptools import setup, find_packages

setup(
    name="orrery",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    package_data={"orrery.catalog": ["planets.json"]},
    install_requires=[
        "click>=8.0.0",
        "sqlalchemy>=2.0.0",
    ],
    extras_require={
        "precise": ["skyfield>=1.45"],
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "orrery=orrery.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
